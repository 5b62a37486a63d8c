"""Identity providers — resolve the authenticated user id for a request."""

from __future__ import annotations

from starlette.requests import Request

from fastapi_route_guards._types import IdentityProvider, UserId
from fastapi_route_guards.settings import get_settings


def session_user_id(key: str | None = None) -> IdentityProvider:
    """Read the user id from Starlette's session (``SessionMiddleware``).

    Requests without session support resolve to no user.
    """
    session_key = key or get_settings().session_user_key

    async def provider(request: Request) -> UserId | None:
        session = request.scope.get("session")
        if not session:
            return None
        value: UserId | None = session.get(session_key)
        return value

    return provider


def header_user_id(header: str = "X-User-Id") -> IdentityProvider:
    """Read the user id from a header set by a trusted upstream proxy."""

    async def provider(request: Request) -> UserId | None:
        return request.headers.get(header) or None

    return provider


async def anonymous(request: Request) -> UserId | None:
    """Identity provider that never resolves a user."""
    return None
