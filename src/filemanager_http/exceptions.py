"""Exception hierarchy and the error to HTTP status mapping."""

from __future__ import annotations


class FileManagerError(Exception):
    """Base for all file manager exceptions."""


class InvalidOption(FileManagerError):
    """An option passed by the client is not supported (400)."""

    status_code = 400

    def __init__(self, detail: str = "Invalid option") -> None:
        super().__init__(detail)
        self.detail = detail


class DispatchInternalError(FileManagerError):
    """Router-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause


def error_to_http(err: BaseException | None, gone: bool) -> int:
    """Convert an error into an HTTP status code.

    ``gone`` tells apart a resource that never existed (404) from one that
    existed and was removed (410).
    """
    if err is None:
        return 200
    if isinstance(err, PermissionError):
        return 403
    if isinstance(err, FileNotFoundError):
        return 410 if gone else 404
    if isinstance(err, FileExistsError):
        return 409
    return 500
