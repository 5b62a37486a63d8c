"""Shared pytest fixtures for fastapi-route-guards tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request

from fastapi_route_guards.context import RequestContext
from fastapi_route_guards.guard import Guard
from fastapi_route_guards.outcome import CONTINUE, Continue, Reject
from fastapi_route_guards.settings import get_settings


class RecordingGuard(Guard):
    """Guard with a fixed decision that records each invocation."""

    def __init__(
        self,
        name: str,
        decision: Continue | Reject = CONTINUE,
        calls: list[str] | None = None,
    ) -> None:
        self.name = name  # type: ignore[misc]
        self.decision = decision
        self.calls = calls if calls is not None else []

    async def check(self, ctx: RequestContext) -> Continue | Reject:
        self.calls.append(self.name)
        return self.decision


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Any:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_request() -> Any:
    """Factory for creating mock Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        session: dict[str, Any] | None = None,
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        if session is not None:
            scope["session"] = session
        return Request(scope)

    return _make


@pytest.fixture
def make_ctx(make_request: Any) -> Any:
    """Factory for RequestContext instances."""

    def _make(
        user_id: Any = None, route: str | None = "documents#show"
    ) -> RequestContext:
        return RequestContext(request=make_request(), route=route, user_id=user_id)

    return _make


@pytest.fixture
def recording_guard() -> type[RecordingGuard]:
    return RecordingGuard
