"""Contract tests — verify all public symbols are importable from top-level."""

from __future__ import annotations

import fastapi_route_guards

PUBLIC_SYMBOLS = [
    # Core
    "GuardChain",
    "ResolvedChain",
    "RouteBinding",
    "Registration",
    "RequestContext",
    "run_pipeline",
    "guard_dependency",
    # Guards
    "Guard",
    "FunctionGuard",
    "guard",
    "RequireAuthenticatedUser",
    # Decisions and outcomes
    "Continue",
    "CONTINUE",
    "Reject",
    "Authorized",
    "AUTHORIZED",
    "Rejected",
    "PipelineState",
    # Exceptions
    "GuardException",
    "AuthorizationRejected",
    "GuardEvaluationError",
    "ConfigurationError",
    # Identity providers
    "session_user_id",
    "header_user_id",
    "anonymous",
    # Response writer and OpenAPI
    "install_rejection_handler",
    "enrich_openapi",
    # Hooks
    "PipelineHook",
    "BeforePipeline",
    "AfterPipeline",
    "AfterGuard",
    # Trace
    "PipelineTrace",
    "TraceEntry",
    # Settings
    "GuardSettings",
    "get_settings",
]


class TestPublicAPIContract:
    def test_all_symbols_importable(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert hasattr(fastapi_route_guards, symbol), (
                f"Symbol '{symbol}' not found in fastapi_route_guards"
            )

    def test_all_symbols_in_all(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert symbol in fastapi_route_guards.__all__, (
                f"Symbol '{symbol}' not in __all__"
            )

    def test_no_unexpected_exports(self) -> None:
        assert sorted(fastapi_route_guards.__all__) == sorted(PUBLIC_SYMBOLS)

    def test_guard_chain_builder_methods(self) -> None:
        from fastapi_route_guards import GuardChain

        chain = GuardChain()
        for method in ("add", "add_hook", "bind", "skip", "resolve"):
            assert hasattr(chain, method)

    def test_request_context_is_dataclass(self) -> None:
        from dataclasses import fields

        from fastapi_route_guards import RequestContext

        field_names = [f.name for f in fields(RequestContext)]
        assert field_names == ["request", "route", "user_id", "state"]
