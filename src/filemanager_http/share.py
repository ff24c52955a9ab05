"""Share links — store protocol, in-memory store and the public share page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Protocol, runtime_checkable

from starlette.concurrency import run_in_threadpool

from filemanager_http.context import RequestContext
from filemanager_http.exceptions import error_to_http
from filemanager_http.files import FileInfo
from filemanager_http.outcome import Finalize, Outcome
from filemanager_http.render import render_file, render_template

logger = logging.getLogger(__name__)

SHARE_NOT_FOUND_PAGE = "static/share/404.html"
SHARE_INDEX_PAGE = "static/share/index.html"


@dataclass
class ShareLink:
    """Public hash pointing at a file, optionally expiring."""

    hash: str
    path: str
    expires: bool = False
    expire_date: datetime | None = None

    def __post_init__(self) -> None:
        # Naive timestamps, as stored by most SQL DateTime columns, are UTC
        if self.expire_date is not None and self.expire_date.tzinfo is None:
            self.expire_date = self.expire_date.replace(tzinfo=timezone.utc)

    def is_expired(self, now: datetime | None = None) -> bool:
        if not self.expires:
            return False
        if self.expire_date is None:
            return True
        return self.expire_date < (now or datetime.now(timezone.utc))


class LookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class ShareLookup:
    """Result of a store lookup: found, not found, or failed."""

    status: LookupStatus
    link: ShareLink | None = None
    error: Exception | None = None

    @classmethod
    def found(cls, link: ShareLink) -> ShareLookup:
        return cls(LookupStatus.FOUND, link=link)

    @classmethod
    def not_found(cls) -> ShareLookup:
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: Exception) -> ShareLookup:
        return cls(LookupStatus.FAILED, error=error)


@runtime_checkable
class ShareStore(Protocol):
    """Keyed storage of share links.

    ``delete`` must be a no-op for links that are already gone: two requests
    may race to delete the same expired link.
    """

    async def get(self, hash: str) -> ShareLookup: ...
    async def delete(self, link: ShareLink) -> None: ...


class InMemoryShareStore:
    """Share store kept in a dict. Single-process only."""

    def __init__(self, links: list[ShareLink] | None = None) -> None:
        self._links: dict[str, ShareLink] = {}
        for link in links or ():
            self._links[link.hash] = link

    async def save(self, link: ShareLink) -> None:
        self._links[link.hash] = link

    async def get(self, hash: str) -> ShareLookup:
        link = self._links.get(hash)
        if link is None:
            return ShareLookup.not_found()
        return ShareLookup.found(link)

    async def delete(self, link: ShareLink) -> None:
        self._links.pop(link.hash, None)


def _not_found_page(ctx: RequestContext) -> Outcome:
    return render_file(
        ctx, ctx.config.assets.must_string(SHARE_NOT_FOUND_PAGE), "text/html"
    )


async def share_page(ctx: RequestContext) -> Outcome:
    """Resolve the share hash in ``ctx.path`` to a preview or a download.

    Expired links are deleted on access and then answered exactly like
    unknown hashes.
    """
    store = ctx.config.share_store
    lookup = await store.get(ctx.path)

    if lookup.status is LookupStatus.NOT_FOUND:
        return _not_found_page(ctx)
    if lookup.status is LookupStatus.FAILED or lookup.link is None:
        return Finalize(500, lookup.error)

    link = lookup.link
    if link.is_expired():
        try:
            await store.delete(link)
        except Exception:
            logger.warning("Could not delete expired share %s", link.hash, exc_info=True)
        else:
            logger.info("Deleted expired share %s", link.hash)
        return _not_found_page(ctx)

    try:
        info = await run_in_threadpool(FileInfo.from_path, link.path)
    except OSError as exc:
        return Finalize(error_to_http(exc, False), exc)

    ctx.file = info
    ctx.path = link.path

    dl = ctx.request.query_params.get("dl", "")
    if dl in ("", "0"):
        return render_template(
            ctx.config.assets.must_string(SHARE_INDEX_PAGE),
            "text/html",
            {"BaseURL": ctx.config.root_url, "File": info},
        )

    return await ctx.config.handlers.download(ctx)
