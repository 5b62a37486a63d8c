"""Built-in guards."""

from __future__ import annotations

from typing import Any

from fastapi_route_guards.context import RequestContext
from fastapi_route_guards.guard import Guard
from fastapi_route_guards.outcome import CONTINUE, Continue, Reject
from fastapi_route_guards.settings import get_settings


class RequireAuthenticatedUser(Guard):
    """Rejects requests whose context carries no authenticated user id."""

    name = "require_authenticated_user"

    def __init__(
        self, *, status_code: int | None = None, reason: str | None = None
    ) -> None:
        settings = get_settings()
        self._status_code = (
            settings.unauthorized_status if status_code is None else status_code
        )
        self._reason = settings.unauthorized_reason if reason is None else reason

    async def check(self, ctx: RequestContext) -> Continue | Reject:
        if ctx.user_id is None:
            return Reject(self._reason, status_code=self._status_code)
        return CONTINUE

    def openapi_spec(self) -> dict[str, Any] | None:
        return {
            "responses": {
                str(self._status_code): {"description": self._reason},
            },
        }
