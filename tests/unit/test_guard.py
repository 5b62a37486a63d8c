"""Tests for the Guard ABC and function-based guards."""

from __future__ import annotations

from typing import Any

import pytest

from fastapi_route_guards.context import RequestContext
from fastapi_route_guards.guard import FunctionGuard, Guard, guard
from fastapi_route_guards.outcome import CONTINUE, Continue, Reject


class TestGuardBase:
    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            Guard()  # type: ignore[abstract]

    def test_openapi_spec_default_returns_none(self) -> None:
        class Minimal(Guard):
            name = "minimal"

            async def check(self, ctx: RequestContext) -> Continue | Reject:
                return CONTINUE

        assert Minimal().openapi_spec() is None
        assert repr(Minimal()) == "<Minimal 'minimal'>"


class TestFunctionGuard:
    async def test_decorator_builds_named_guard(self, make_ctx: Any) -> None:
        @guard("only_42")
        async def only_42(ctx: RequestContext) -> Continue | Reject:
            if ctx.user_id == 42:
                return CONTINUE
            return Reject("Forbidden", status_code=403)

        assert isinstance(only_42, FunctionGuard)
        assert only_42.name == "only_42"
        assert await only_42.check(make_ctx(user_id=42)) == CONTINUE
        assert await only_42.check(make_ctx(user_id=7)) == Reject(
            "Forbidden", status_code=403
        )

    def test_responses_exposed_as_openapi(self) -> None:
        async def cb(ctx: RequestContext) -> Continue | Reject:
            return CONTINUE

        g = FunctionGuard("g", cb, responses={"403": {"description": "Forbidden"}})
        assert g.openapi_spec() == {"responses": {"403": {"description": "Forbidden"}}}
        assert FunctionGuard("h", cb).openapi_spec() is None

    def test_instances_keep_distinct_names(self) -> None:
        async def cb(ctx: RequestContext) -> Continue | Reject:
            return CONTINUE

        assert FunctionGuard("a", cb).name == "a"
        assert FunctionGuard("b", cb).name == "b"
