"""API dispatcher — authentication, authorization and resource-area fan out."""

from __future__ import annotations

import logging

from filemanager_http.context import RequestContext
from filemanager_http.exceptions import error_to_http
from filemanager_http.outcome import Finalize, Outcome
from filemanager_http.paths import split_url

logger = logging.getLogger(__name__)

FILE_ROUTERS = frozenset({"checksum", "download"})


async def api_handler(ctx: RequestContext) -> Outcome:
    """Dispatch a request whose path had ``/api`` stripped.

    Order matters: authentication runs before the path is split,
    authorization runs before the static generator hook, and file info is
    resolved once for the routes that need it.
    """
    config = ctx.config
    handlers = config.handlers

    # These two establish authentication, so they cannot require it
    if ctx.path == "/auth/get":
        return await handlers.auth(ctx)
    if ctx.path == "/auth/renew":
        return await handlers.renew_auth(ctx)

    if not await config.authenticator.validate(ctx):
        logger.debug("Unauthenticated API request to %s", ctx.path)
        return Finalize(403)

    ctx.router, ctx.path = split_url(ctx.path)

    if ctx.user is None or not ctx.user.allowed(ctx.path):
        logger.debug("API request to %s %s denied", ctx.router, ctx.path)
        return Finalize(403)

    static_gen = config.static_gen
    if static_gen is not None:
        # "/settings" is an alias for the generator's own settings file
        if ctx.path == "/settings":
            ctx.path = static_gen.settings_path()

        outcome = await static_gen.hook(ctx)
        if outcome is not None:
            return outcome

    if ctx.router in FILE_ROUTERS:
        try:
            ctx.file = await handlers.file_info(ctx)
        except OSError as exc:
            return Finalize(error_to_http(exc, False), exc)

    handler = handlers.route(ctx.router)
    if handler is None:
        return Finalize(404)

    return await handler(ctx)
