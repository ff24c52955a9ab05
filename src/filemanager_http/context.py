"""RequestContext - what the router knows about the request being served."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from starlette.requests import Request

if TYPE_CHECKING:
    from filemanager_http._types import Principal
    from filemanager_http.config import ServiceConfig
    from filemanager_http.files import FileInfo


@dataclass
class RequestContext:
    """Per-request state threaded through the router and handlers.

    ``path`` starts as the request path and is rewritten as the request
    descends: the base URL, ``/api`` and the resource-area token are stripped
    from it along the way.
    """

    request: Request
    config: ServiceConfig
    path: str = ""
    user: Principal | None = None
    file: FileInfo | None = None
    router: str = ""
    state: dict[str, Any] = field(default_factory=dict)
