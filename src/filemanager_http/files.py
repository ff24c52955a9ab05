"""FileInfo — file metadata attached to a request."""

from __future__ import annotations

import hashlib
import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from starlette.concurrency import run_in_threadpool

from filemanager_http.exceptions import InvalidOption

if TYPE_CHECKING:
    from filemanager_http.context import RequestContext

CHECKSUM_ALGORITHMS = ("md5", "sha1", "sha256", "sha512")

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class FileInfo:
    """Metadata of a single file or directory."""

    path: str
    name: str
    mod_time: datetime
    mode: int
    is_dir: bool
    size: int

    @classmethod
    def from_path(cls, path: str) -> FileInfo:
        """Stat ``path``. Raises ``OSError`` when it cannot be read."""
        st = os.stat(path)
        return cls(
            path=path,
            name=os.path.basename(os.path.normpath(path)),
            mod_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            mode=st.st_mode,
            is_dir=stat.S_ISDIR(st.st_mode),
            size=st.st_size,
        )

    def checksum(self, algo: str) -> str:
        """Hex digest of the file contents.

        Raises ``InvalidOption`` for directories and unsupported algorithms.
        """
        if self.is_dir or algo not in CHECKSUM_ALGORITHMS:
            raise InvalidOption(f"Unsupported checksum: {algo!r}")

        h = hashlib.new(algo)
        with open(self.path, "rb") as fh:
            for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
                h.update(chunk)
        return h.hexdigest()


def resolve_in_scope(scope: str, path: str) -> str:
    """Join a request path onto a user's scope, refusing escapes."""
    root = os.path.abspath(scope)
    full = os.path.normpath(os.path.join(root, path.lstrip("/")))
    if full != root and not full.startswith(root.rstrip(os.sep) + os.sep):
        raise PermissionError(f"Path outside of scope: {path!r}")
    return full


async def lookup_file_info(ctx: RequestContext) -> FileInfo:
    """Default file info lookup: ``ctx.path`` inside the user's scope."""
    if ctx.user is None:
        raise PermissionError("No user attached to the request")

    full = resolve_in_scope(ctx.user.scope, ctx.path)
    return await run_in_threadpool(FileInfo.from_path, full)
