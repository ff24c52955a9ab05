"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filemanager_http.context import RequestContext
    from filemanager_http.files import FileInfo
    from filemanager_http.outcome import Outcome


@runtime_checkable
class Principal(Protocol):
    """The requesting user as seen by the router."""

    scope: str

    def allowed(self, path: str) -> bool: ...


# Named API handlers receive the context and answer with an outcome
Handler = Callable[["RequestContext"], Awaitable["Outcome"]]
FileInfoLookup = Callable[["RequestContext"], Awaitable["FileInfo"]]

# Turns a raw auth token into a principal
DecodeCallback = Callable[[str], Awaitable[Any]]
