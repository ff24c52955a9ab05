"""Tests for URL path helpers."""

from __future__ import annotations

import pytest

from filemanager_http.paths import match_url, split_url


class TestMatchURL:
    def test_prefix_matches(self) -> None:
        assert match_url("/static/app.js", "/static")

    def test_case_insensitive(self) -> None:
        assert match_url("/API/resource", "/api")
        assert match_url("/api/resource", "/API")

    def test_non_prefix_does_not_match(self) -> None:
        assert not match_url("/files/static", "/static")

    def test_empty_prefix_matches_everything(self) -> None:
        assert match_url("/anything", "")


class TestSplitURL:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("", ("", "")),
            ("/settings", ("settings", "")),
            ("/settings/theme", ("settings", "/theme")),
            ("noslash", ("", "noslash")),
            ("/resource/docs/report.txt", ("resource", "/docs/report.txt")),
            ("/resource/", ("resource", "/")),
        ],
    )
    def test_split(self, path: str, expected: tuple[str, str]) -> None:
        assert split_url(path) == expected

    def test_head_never_contains_separator(self) -> None:
        head, rest = split_url("/download/a/b/c")
        assert "/" not in head
        assert rest.startswith("/")
