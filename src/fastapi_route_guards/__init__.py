"""FastAPI Route Guards - ordered before-action guards with per-route skips."""

from fastapi_route_guards.chain import (
    GuardChain,
    Registration,
    ResolvedChain,
    RouteBinding,
)
from fastapi_route_guards.context import RequestContext
from fastapi_route_guards.dependency import enrich_openapi, guard_dependency
from fastapi_route_guards.exceptions import (
    AuthorizationRejected,
    ConfigurationError,
    GuardEvaluationError,
    GuardException,
)
from fastapi_route_guards.guard import FunctionGuard, Guard, guard
from fastapi_route_guards.guards import RequireAuthenticatedUser
from fastapi_route_guards.handlers import install_rejection_handler
from fastapi_route_guards.hooks import (
    AfterGuard,
    AfterPipeline,
    BeforePipeline,
    PipelineHook,
)
from fastapi_route_guards.identity import anonymous, header_user_id, session_user_id
from fastapi_route_guards.outcome import (
    AUTHORIZED,
    CONTINUE,
    Authorized,
    Continue,
    PipelineState,
    Reject,
    Rejected,
)
from fastapi_route_guards.pipeline import run_pipeline
from fastapi_route_guards.settings import GuardSettings, get_settings
from fastapi_route_guards.trace import PipelineTrace, TraceEntry

__all__ = [
    "AUTHORIZED",
    "AfterGuard",
    "AfterPipeline",
    "AuthorizationRejected",
    "Authorized",
    "BeforePipeline",
    "CONTINUE",
    "ConfigurationError",
    "Continue",
    "FunctionGuard",
    "Guard",
    "GuardChain",
    "GuardEvaluationError",
    "GuardException",
    "GuardSettings",
    "PipelineHook",
    "PipelineState",
    "PipelineTrace",
    "Registration",
    "Reject",
    "Rejected",
    "RequestContext",
    "RequireAuthenticatedUser",
    "ResolvedChain",
    "RouteBinding",
    "TraceEntry",
    "anonymous",
    "enrich_openapi",
    "get_settings",
    "guard",
    "guard_dependency",
    "header_user_id",
    "install_rejection_handler",
    "run_pipeline",
    "session_user_id",
]
