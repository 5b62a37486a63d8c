"""GuardException hierarchy for rejections and evaluation faults."""

from __future__ import annotations


class GuardException(Exception):
    """Base for all guard exceptions."""


class AuthorizationRejected(GuardException):
    """A guard rejected the request; carries the reason and status code."""

    def __init__(
        self, reason: str, *, status_code: int = 401, guard: str | None = None
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
        self.guard = guard


class GuardEvaluationError(GuardException):
    """A guard failed to evaluate; reported upward as an infrastructure fault."""

    def __init__(
        self,
        detail: str,
        *,
        guard: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.guard = guard
        self.cause = cause


class ConfigurationError(GuardException):
    """Guard chain configuration is invalid."""
