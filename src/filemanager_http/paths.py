"""URL path helpers shared by the router and the API dispatcher."""

from __future__ import annotations


def match_url(path: str, prefix: str) -> bool:
    """Case-insensitive prefix test."""
    return path.lower().startswith(prefix.lower())


def split_url(path: str) -> tuple[str, str]:
    """Split a path into the segment before the first slash and the rest.

    The leading slash is dropped before splitting. The first element never
    contains a slash, while the second keeps its leading slash so handlers
    always receive either ``""`` or a path starting with ``/``::

        split_url("/settings/theme") == ("settings", "/theme")
        split_url("/settings") == ("settings", "")
        split_url("noslash") == ("", "noslash")
    """
    if path == "":
        return "", ""

    if not path.startswith("/"):
        i = path.find("/")
        if i == -1:
            return "", path
        return path[:i], path[i:]

    path = path[1:]

    i = path.find("/")
    if i == -1:
        return path, ""

    return path[:i], path[i:]
