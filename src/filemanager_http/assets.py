"""Static asset providers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from filemanager_http.outcome import Finalize, Outcome, Written


@runtime_checkable
class AssetProvider(Protocol):
    """Source of the UI bundle: named text resources plus verbatim files."""

    def must_string(self, name: str) -> str: ...
    async def serve(self, path: str, scope: Scope) -> Outcome: ...


class DirectoryAssets:
    """Asset provider backed by a directory on disk.

    ``must_string`` names are relative to the directory, e.g. ``index.html``
    or ``static/share/404.html``. ``serve`` takes the request path, which
    already includes the ``/static`` segment.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)
        self._files = StaticFiles(directory=self.directory)
        self._texts: dict[str, str] = {}

    def must_string(self, name: str) -> str:
        """Return the resource text. Raises ``FileNotFoundError`` if missing.

        The bundle is immutable while the service runs, so each resource is
        read from disk once and served from memory afterwards.
        """
        text = self._texts.get(name)
        if text is None:
            text = (self.directory / name).read_text(encoding="utf-8")
            self._texts[name] = text
        return text

    async def serve(self, path: str, scope: Scope) -> Outcome:
        try:
            response = await self._files.get_response(path.lstrip("/"), scope)
        except HTTPException as exc:
            return Finalize(exc.status_code, exc)
        return Written(response)
