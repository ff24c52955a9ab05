"""Named API handlers and their defaults."""

from __future__ import annotations

from dataclasses import dataclass

from starlette.concurrency import run_in_threadpool
from starlette.responses import FileResponse, PlainTextResponse

from filemanager_http._types import FileInfoLookup, Handler
from filemanager_http.context import RequestContext
from filemanager_http.exceptions import InvalidOption
from filemanager_http.files import lookup_file_info
from filemanager_http.outcome import Finalize, Outcome, Written


async def not_implemented(ctx: RequestContext) -> Outcome:
    return Finalize(501)


async def serve_download(ctx: RequestContext) -> Outcome:
    """Send ``ctx.file`` as an attachment. Directories are not archived here."""
    if ctx.file is None:
        return Finalize(404)
    if ctx.file.is_dir:
        return Finalize(501)

    return Written(FileResponse(ctx.file.path, filename=ctx.file.name))


async def checksum_handler(ctx: RequestContext) -> Outcome:
    """Answer with the hex digest of ``ctx.file`` for the ``algo`` query."""
    if ctx.file is None:
        return Finalize(404)

    algo = ctx.request.query_params.get("algo", "")
    try:
        value = await run_in_threadpool(ctx.file.checksum, algo)
    except InvalidOption as exc:
        return Finalize(400, exc)
    except OSError as exc:
        return Finalize(500, exc)

    return Written(PlainTextResponse(value))


@dataclass
class Handlers:
    """Collaborators the API dispatcher fans out to, by resource area."""

    auth: Handler = not_implemented
    renew_auth: Handler = not_implemented
    download: Handler = serve_download
    command: Handler = not_implemented
    search: Handler = not_implemented
    resource: Handler = not_implemented
    users: Handler = not_implemented
    settings: Handler = not_implemented
    share: Handler = not_implemented
    file_info: FileInfoLookup = lookup_file_info

    def route(self, router: str) -> Handler | None:
        """Handler for a resource-area token, ``None`` when unknown."""
        routes: dict[str, Handler] = {
            "download": self.download,
            "checksum": checksum_handler,
            "command": self.command,
            "search": self.search,
            "resource": self.resource,
            "users": self.users,
            "settings": self.settings,
            "share": self.share,
        }
        return routes.get(router)
