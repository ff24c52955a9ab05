"""Shared pytest fixtures for filemanager-http tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request

from filemanager_http.assets import DirectoryAssets
from filemanager_http.authentication import NoAuthentication
from filemanager_http.config import ServiceConfig
from filemanager_http.context import RequestContext
from filemanager_http.outcome import Finalize, Outcome
from filemanager_http.share import InMemoryShareStore
from filemanager_http.users import User

ASSETS = {
    "index.html": "<html><body data-base='{{ BaseURL }}' data-gen='{{ StaticGen }}'>"
    "</body></html>",
    "sw.js": "const BASE = '{{ BaseURL }}';",
    "static/manifest.json": '{"start_url": "{{ BaseURL }}/"}',
    "static/app.js": "console.log('app');",
    "static/share/404.html": "<h1>This share does not exist</h1>",
    "static/share/index.html": "<h1>{{ File.name }}</h1>"
    "<a href='{{ BaseURL }}/share/?dl=1'>{{ File.size }}</a>",
}


class StubStaticGen:
    """Static generator double recording hook calls."""

    name = "hugo"

    def __init__(self, hook_outcome: Outcome | None = None) -> None:
        self.hook_outcome = hook_outcome
        self.hook_paths: list[str] = []
        self.preview_paths: list[str] = []

    def settings_path(self) -> str:
        return "/config.toml"

    async def preview(self, ctx: RequestContext) -> Outcome:
        self.preview_paths.append(ctx.path)
        return Finalize(200)

    async def hook(self, ctx: RequestContext) -> Outcome | None:
        self.hook_paths.append(ctx.path)
        return self.hook_outcome


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects from a raw scope."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    for name, text in ASSETS.items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def files_dir(tmp_path: Path) -> Path:
    root = tmp_path / "files"
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "report.txt").write_text("hello world", encoding="utf-8")
    (root / "secret").mkdir()
    (root / "secret" / "keys.txt").write_text("top secret", encoding="utf-8")
    return root


@pytest.fixture
def user(files_dir: Path) -> User:
    return User(username="admin", scope=str(files_dir))


@pytest.fixture
def make_config(assets_dir: Path, user: User) -> Any:
    """Factory for ServiceConfig with working defaults."""

    def _make(**overrides: Any) -> ServiceConfig:
        options: dict[str, Any] = {
            "assets": DirectoryAssets(assets_dir),
            "authenticator": NoAuthentication(user),
            "share_store": InMemoryShareStore(),
        }
        options.update(overrides)
        return ServiceConfig(**options)

    return _make


@pytest.fixture
def make_ctx(make_request: Any, make_config: Any) -> Any:
    """Factory for a RequestContext whose working path is the request path."""

    def _make(
        path: str = "/",
        *,
        method: str = "GET",
        query_string: str = "",
        headers: dict[str, str] | None = None,
        config: ServiceConfig | None = None,
    ) -> RequestContext:
        request = make_request(
            method=method, path=path, headers=headers, query_string=query_string
        )
        return RequestContext(
            request=request, config=config or make_config(), path=path
        )

    return _make


@pytest.fixture
def handler_mock() -> AsyncMock:
    """Named API handler double answering with a finalized 200."""
    return AsyncMock(return_value=Finalize(200))


@pytest.fixture
def make_static_gen() -> Any:
    """Factory for the static generator double."""
    return StubStaticGen
