"""Tests for RequestContext dataclass."""

from __future__ import annotations

from typing import Any

from fastapi_route_guards.context import RequestContext


class TestRequestContext:
    def test_construction_with_request(self, make_request: Any) -> None:
        request = make_request()
        ctx = RequestContext(request=request)
        assert ctx.request is request

    def test_defaults(self, make_request: Any) -> None:
        ctx = RequestContext(request=make_request())
        assert ctx.route is None
        assert ctx.user_id is None
        assert ctx.state == {}

    def test_is_authenticated_follows_user_id(self, make_request: Any) -> None:
        ctx = RequestContext(request=make_request())
        assert ctx.is_authenticated is False
        ctx.user_id = 42
        assert ctx.is_authenticated is True

    def test_zero_user_id_counts_as_authenticated(self, make_request: Any) -> None:
        ctx = RequestContext(request=make_request(), user_id=0)
        assert ctx.is_authenticated is True

    def test_state_not_shared_between_instances(self, make_request: Any) -> None:
        ctx1 = RequestContext(request=make_request())
        ctx2 = RequestContext(request=make_request())
        ctx1.state["x"] = 1
        assert "x" not in ctx2.state
