"""FastAPI dependency that opens a RequestContext for each incoming request."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from starlette.requests import Request

from filemanager_http.config import ServiceConfig
from filemanager_http.context import RequestContext


def context_dependency(
    config: ServiceConfig,
) -> Callable[[Request], Awaitable[RequestContext]]:
    """Build the per-request dependency bound to ``config``."""

    async def dependency(request: Request) -> RequestContext:
        return RequestContext(request=request, config=config, path=request.url.path)

    return dependency
