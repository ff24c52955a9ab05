"""Top-level router — the entry point of every request."""

from __future__ import annotations

from filemanager_http.api import api_handler
from filemanager_http.context import RequestContext
from filemanager_http.outcome import Finalize, Outcome
from filemanager_http.paths import match_url
from filemanager_http.render import render_file
from filemanager_http.share import share_page

MANIFEST_PATH = "/static/manifest.json"

SECURITY_HEADERS = {
    "X-Frame-Options": "SAMEORIGIN",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
}


async def serve_http(ctx: RequestContext) -> Outcome:
    """Route a request to the area that handles it."""
    config = ctx.config

    # A request outside the base URL does not belong to this instance
    path = ctx.path.removeprefix(config.base_url)
    if len(path) >= len(ctx.path) and config.base_url != "":
        return Finalize(404)
    ctx.path = path

    # The service worker goes through the template so it knows the base URL
    if ctx.path == "/sw.js":
        return render_file(
            ctx, config.assets.must_string("sw.js"), "application/javascript"
        )

    if match_url(ctx.path, "/static"):
        if ctx.request.method != "GET":
            return Finalize(501)
        return await static_handler(ctx)

    if match_url(ctx.path, "/api"):
        ctx.path = ctx.path[len("/api") :]
        return await api_handler(ctx)

    if ctx.path.startswith("/preview") and config.static_gen is not None:
        ctx.path = ctx.path.removeprefix("/preview")
        return await config.static_gen.preview(ctx)

    if ctx.path.startswith("/share/"):
        ctx.path = ctx.path.removeprefix("/share/")
        return await share_page(ctx)

    # Anything else is a client-side route of the UI
    return render_file(
        ctx,
        config.assets.must_string("index.html"),
        "text/html",
        headers=SECURITY_HEADERS,
    )


async def static_handler(ctx: RequestContext) -> Outcome:
    """Serve the bundle verbatim, except the manifest which is rendered."""
    if ctx.path != MANIFEST_PATH:
        return await ctx.config.assets.serve(ctx.path, ctx.request.scope)

    return render_file(
        ctx,
        ctx.config.assets.must_string("static/manifest.json"),
        "application/json",
    )
