"""RequestContext — per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starlette.requests import Request

from fastapi_route_guards._types import UserId


@dataclass
class RequestContext:
    """Request-scoped data handed to every guard of a pipeline run."""

    request: Request
    route: str | None = None
    user_id: UserId | None = None
    state: dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None
