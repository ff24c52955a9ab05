"""Authentication backends — token and no-auth."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from filemanager_http._types import DecodeCallback
from filemanager_http.context import RequestContext

logger = logging.getLogger(__name__)


@runtime_checkable
class Authenticator(Protocol):
    """Validates a request and attaches the principal to ``ctx.user``."""

    async def validate(self, ctx: RequestContext) -> bool: ...


class TokenAuthentication:
    """Extracts a token from a header or cookie and decodes it via callback.

    The header wins over the cookie. Any decode failure is reported as an
    invalid request; the reason is only logged.
    """

    def __init__(
        self,
        decode: DecodeCallback,
        *,
        header: str = "X-Auth",
        cookie: str = "auth",
    ) -> None:
        self._decode = decode
        self._header = header
        self._cookie = cookie

    async def validate(self, ctx: RequestContext) -> bool:
        token = ctx.request.headers.get(self._header)
        if not token:
            token = ctx.request.cookies.get(self._cookie)
        if not token:
            return False

        try:
            user = await self._decode(token)
        except Exception:
            logger.debug("Token rejected", exc_info=True)
            return False

        if user is None:
            return False

        ctx.user = user
        return True


class NoAuthentication:
    """Treats every request as authenticated as a fixed user."""

    def __init__(self, user: Any) -> None:
        self._user = user

    async def validate(self, ctx: RequestContext) -> bool:
        ctx.user = self._user
        return True
