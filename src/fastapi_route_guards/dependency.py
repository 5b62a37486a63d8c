"""guard_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import HTTPException
from starlette.requests import Request

from fastapi_route_guards._types import IdentityProvider
from fastapi_route_guards.chain import GuardChain, ResolvedChain
from fastapi_route_guards.context import RequestContext
from fastapi_route_guards.exceptions import (
    AuthorizationRejected,
    GuardEvaluationError,
    GuardException,
)
from fastapi_route_guards.identity import session_user_id
from fastapi_route_guards.openapi import collect_openapi_metadata
from fastapi_route_guards.outcome import Rejected
from fastapi_route_guards.pipeline import run_pipeline
from fastapi_route_guards.trace import PipelineTrace

logger = logging.getLogger(__name__)


def guard_dependency(
    chain: GuardChain | ResolvedChain,
    route: str,
    *,
    identity: IdentityProvider | None = None,
) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI dependency running ``route``'s guards before the action.

    The dependency resolves the user id through ``identity`` (session by
    default), runs the pipeline and returns the RequestContext. A rejection
    is raised as AuthorizationRejected, which ``install_rejection_handler``
    renders; a guard fault becomes an HTTP 500.
    """
    resolved = chain.resolve() if isinstance(chain, GuardChain) else chain
    guards = resolved.effective_guards(route)
    provider = identity or session_user_id()

    async def dependency(request: Request) -> RequestContext:
        ctx = RequestContext(
            request=request, route=route, user_id=await provider(request)
        )
        trace: PipelineTrace | None = None
        if resolved.debug:
            trace = PipelineTrace(route=route)
            ctx.state["trace"] = trace

        try:
            outcome = await run_pipeline(
                guards, ctx, hooks=resolved.hooks, trace=trace
            )
        except GuardEvaluationError as exc:
            raise HTTPException(status_code=500, detail=exc.detail) from exc
        except GuardException:
            raise
        except Exception as exc:
            logger.exception("Guard pipeline failed on route %r", route)
            wrapped = GuardEvaluationError("Internal guard error", cause=exc)
            raise HTTPException(status_code=500, detail=wrapped.detail) from wrapped

        if isinstance(outcome, Rejected):
            raise AuthorizationRejected(
                outcome.reason, status_code=outcome.status_code, guard=outcome.guard
            )
        return ctx

    # Attach metadata for OpenAPI enrichment
    dependency._guard_openapi_metadata = collect_openapi_metadata(guards)  # type: ignore[attr-defined]
    dependency._guard_route = route  # type: ignore[attr-defined]

    return dependency


def enrich_openapi(app: Any) -> None:
    """Enrich FastAPI app's OpenAPI schema with guard metadata.

    Call this after all routes are registered to document each guarded
    route's rejection responses and its ``x-guards`` list.
    """
    from fastapi import FastAPI
    from fastapi.routing import APIRoute

    if not isinstance(app, FastAPI):
        return

    for route in app.routes:
        if not isinstance(route, APIRoute):
            continue

        metadata = _find_guard_metadata(route)
        if not metadata:
            continue

        if "responses" in metadata:
            existing = route.responses or {}
            for code, resp in metadata["responses"].items():
                existing.setdefault(int(code), resp)
            route.responses = existing

        if "x-guards" in metadata:
            route.openapi_extra = route.openapi_extra or {}
            route.openapi_extra["x-guards"] = metadata["x-guards"]

    app.openapi_schema = None


def _find_guard_metadata(route: Any) -> dict[str, Any] | None:
    """Find guard OpenAPI metadata attached to route dependencies."""
    for dep in route.dependant.dependencies:
        call = dep.call
        if hasattr(call, "_guard_openapi_metadata"):
            result: dict[str, Any] = call._guard_openapi_metadata
            return result
    return None
