"""create_app() — FastAPI application serving every path through the router."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI
from starlette.responses import Response

from filemanager_http.config import ServiceConfig
from filemanager_http.context import RequestContext
from filemanager_http.dependency import context_dependency
from filemanager_http.exceptions import DispatchInternalError
from filemanager_http.outcome import Finalize, Outcome, finalize
from filemanager_http.router import serve_http

logger = logging.getLogger(__name__)

HTTP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def dispatch(ctx: RequestContext) -> Response:
    """Run the router and turn its outcome into a response."""
    try:
        outcome: Outcome = await serve_http(ctx)
    except Exception as exc:
        logger.exception("Unhandled error serving %s", ctx.request.url.path)
        wrapped = DispatchInternalError("Internal dispatch error", cause=exc)
        return finalize(Finalize(500, wrapped))

    if isinstance(outcome, Finalize) and outcome.error is not None:
        if outcome.status >= 500:
            logger.error(
                "%s %s: %s",
                outcome.status,
                ctx.request.url.path,
                outcome.error,
                exc_info=outcome.error,
            )
        else:
            logger.debug("%s %s: %s", outcome.status, ctx.request.url.path, outcome.error)

    return finalize(outcome)


def create_app(config: ServiceConfig) -> FastAPI:
    """Build the application. Docs routes are off so they cannot shadow UI paths."""
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    get_context = context_dependency(config)

    @app.api_route(
        "/{full_path:path}", methods=HTTP_METHODS, include_in_schema=False
    )
    async def endpoint(
        ctx: RequestContext = Depends(get_context),  # noqa: B008
    ) -> Response:
        return await dispatch(ctx)

    return app
