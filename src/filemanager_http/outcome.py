"""Dispatch outcomes and their conversion to responses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from http import HTTPStatus

from starlette.responses import PlainTextResponse, Response


@dataclass(frozen=True)
class Written:
    """The handler produced the complete response; nothing is left to do."""

    response: Response


@dataclass(frozen=True)
class Finalize:
    """The handler wants the response finalized with ``status``."""

    status: int
    error: BaseException | None = None
    headers: Mapping[str, str] | None = field(default=None, compare=False)


Outcome = Written | Finalize


def finalize(outcome: Outcome) -> Response:
    """Turn an outcome into the response sent to the client.

    Error details stay server-side: a finalized error only carries the status
    line text.
    """
    if isinstance(outcome, Written):
        return outcome.response

    headers = dict(outcome.headers) if outcome.headers else None

    if outcome.status >= 400:
        try:
            phrase = HTTPStatus(outcome.status).phrase
        except ValueError:
            phrase = ""
        body = f"{outcome.status} {phrase}".rstrip()
        return PlainTextResponse(body, status_code=outcome.status, headers=headers)

    return Response(status_code=outcome.status, headers=headers)
