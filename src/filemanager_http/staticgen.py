"""Static website generator integration points."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from filemanager_http.context import RequestContext
from filemanager_http.outcome import Outcome


@runtime_checkable
class StaticGen(Protocol):
    """A static website generator plugged into the router.

    ``hook`` runs on every authorized API request before the named handler.
    Returning ``None`` lets the request continue; any outcome is used as the
    final answer, so the hook can veto or fully satisfy the request.
    """

    name: str

    def settings_path(self) -> str: ...
    async def preview(self, ctx: RequestContext) -> Outcome: ...
    async def hook(self, ctx: RequestContext) -> Outcome | None: ...
