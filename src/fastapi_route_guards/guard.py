"""Guard abstract base class and function-based guards."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar

from fastapi_route_guards._types import GuardCallback
from fastapi_route_guards.context import RequestContext
from fastapi_route_guards.outcome import Continue, Reject


class Guard(ABC):
    """A named check that may halt request processing before the action runs."""

    name: ClassVar[str]

    @abstractmethod
    async def check(self, ctx: RequestContext) -> Continue | Reject: ...

    def openapi_spec(self) -> dict[str, Any] | None:
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class FunctionGuard(Guard):
    """Guard backed by a plain async callback."""

    name: str  # type: ignore[misc]

    def __init__(
        self,
        name: str,
        callback: GuardCallback,
        *,
        responses: dict[str, Any] | None = None,
    ) -> None:
        self.name = name
        self._callback = callback
        self._responses = responses

    async def check(self, ctx: RequestContext) -> Continue | Reject:
        return await self._callback(ctx)

    def openapi_spec(self) -> dict[str, Any] | None:
        if self._responses is None:
            return None
        return {"responses": self._responses}


def guard(
    name: str, *, responses: dict[str, Any] | None = None
) -> Callable[[GuardCallback], FunctionGuard]:
    """Decorator turning an async ``(ctx) -> Continue | Reject`` into a guard.

    Example::

        @guard("require_admin", responses={"403": {"description": "Forbidden"}})
        async def require_admin(ctx: RequestContext) -> Continue | Reject:
            ...
    """

    def decorator(callback: GuardCallback) -> FunctionGuard:
        return FunctionGuard(name, callback, responses=responses)

    return decorator
