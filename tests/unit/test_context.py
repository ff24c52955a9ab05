"""Tests for RequestContext dataclass."""

from __future__ import annotations

from typing import Any

from filemanager_http.context import RequestContext


class TestRequestContext:
    def test_construction_with_request(self, make_request: Any, make_config: Any) -> None:
        request = make_request()
        config = make_config()
        ctx = RequestContext(request=request, config=config)
        assert ctx.request is request
        assert ctx.config is config

    def test_defaults(self, make_request: Any, make_config: Any) -> None:
        ctx = RequestContext(request=make_request(), config=make_config())
        assert ctx.path == ""
        assert ctx.user is None
        assert ctx.file is None
        assert ctx.router == ""
        assert ctx.state == {}

    def test_state_not_shared_between_instances(
        self, make_request: Any, make_config: Any
    ) -> None:
        config = make_config()
        ctx1 = RequestContext(request=make_request(), config=config)
        ctx2 = RequestContext(request=make_request(), config=config)
        ctx1.state["x"] = 1
        assert "x" not in ctx2.state

    def test_path_is_mutable(self, make_ctx: Any) -> None:
        ctx = make_ctx("/api/resource")
        ctx.path = "/resource"
        assert ctx.path == "/resource"
        assert ctx.request.url.path == "/api/resource"
