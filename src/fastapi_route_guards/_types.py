"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Union

from starlette.requests import Request

if TYPE_CHECKING:
    from fastapi_route_guards.context import RequestContext
    from fastapi_route_guards.outcome import Continue, Reject

UserId = Union[str, int]

# Callback types used by identity providers and function guards
IdentityProvider = Callable[[Request], Awaitable["UserId | None"]]
GuardCallback = Callable[["RequestContext"], Awaitable["Continue | Reject"]]
