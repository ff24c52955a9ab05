"""Template rendering of named text resources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, TemplateError
from starlette.responses import Response

from filemanager_http.outcome import Finalize, Outcome, Written

if TYPE_CHECKING:
    from filemanager_http.context import RequestContext

_html_env = Environment(autoescape=True)
_text_env = Environment(autoescape=False)


def render_template(
    text: str,
    content_type: str,
    variables: Mapping[str, Any],
    *,
    headers: Mapping[str, str] | None = None,
) -> Outcome:
    """Render ``text`` with ``variables`` into a complete response.

    The body is rendered before the response exists, so a failing template
    never produces a partial response.
    """
    env = _html_env if content_type == "text/html" else _text_env
    try:
        body = env.from_string(text).render(**variables)
    except TemplateError as exc:
        return Finalize(500, exc, headers=headers)

    response = Response(
        body,
        headers=dict(headers) if headers else None,
        media_type=f"{content_type}; charset=utf-8",
    )
    return Written(response)


def render_file(
    ctx: RequestContext,
    text: str,
    content_type: str,
    *,
    headers: Mapping[str, str] | None = None,
) -> Outcome:
    """Render a resource with the ``BaseURL`` and ``StaticGen`` variables."""
    static_gen = ctx.config.static_gen
    return render_template(
        text,
        content_type,
        {
            "BaseURL": ctx.config.root_url,
            "StaticGen": static_gen.name if static_gen is not None else "",
        },
        headers=headers,
    )
