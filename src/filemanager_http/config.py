"""Service configuration — environment settings and collaborator wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from filemanager_http.assets import AssetProvider, DirectoryAssets
from filemanager_http.authentication import Authenticator
from filemanager_http.handlers import Handlers
from filemanager_http.share import ShareStore
from filemanager_http.staticgen import StaticGen


def normalize_url_prefix(value: str) -> str:
    """``"files/"`` -> ``"/files"``; empty stays empty."""
    value = value.strip().strip("/")
    return f"/{value}" if value else ""


class Settings(BaseSettings):
    """Environment driven settings, read from ``FILEMANAGER_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="FILEMANAGER_", env_file=".env")

    base_url: str = ""
    prefix_url: str = ""
    assets_dir: Path = Path("assets")
    log_level: str = "INFO"

    @field_validator("base_url", "prefix_url")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_url_prefix(value)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.getLogger("filemanager_http").setLevel(settings.log_level.upper())


@dataclass
class ServiceConfig:
    """Process-wide configuration placed on every request context."""

    assets: AssetProvider
    authenticator: Authenticator
    share_store: ShareStore
    handlers: Handlers = field(default_factory=Handlers)
    base_url: str = ""
    prefix_url: str = ""
    static_gen: StaticGen | None = None

    @property
    def root_url(self) -> str:
        """URL the UI is reachable at, as seen by the browser."""
        return self.prefix_url + self.base_url

    @classmethod
    def from_settings(cls, settings: Settings, **collaborators: Any) -> ServiceConfig:
        if "assets" not in collaborators:
            collaborators["assets"] = DirectoryAssets(settings.assets_dir)
        return cls(
            base_url=settings.base_url,
            prefix_url=settings.prefix_url,
            **collaborators,
        )
