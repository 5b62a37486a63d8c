"""run_pipeline() — ordered guard execution with short-circuit on rejection."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from fastapi_route_guards.context import RequestContext
from fastapi_route_guards.exceptions import GuardEvaluationError
from fastapi_route_guards.guard import Guard
from fastapi_route_guards.hooks import PipelineHook
from fastapi_route_guards.outcome import (
    AUTHORIZED,
    Continue,
    Outcome,
    Reject,
    Rejected,
)
from fastapi_route_guards.trace import PipelineTrace, TraceEntry

logger = logging.getLogger(__name__)


async def run_pipeline(
    guards: Sequence[Guard],
    ctx: RequestContext,
    *,
    hooks: Sequence[PipelineHook] = (),
    trace: PipelineTrace | None = None,
) -> Outcome:
    """Evaluate ``guards`` in order and stop at the first rejection.

    Returns ``AUTHORIZED`` when every guard continues (including when
    ``guards`` is empty), otherwise the ``Rejected`` outcome of the first
    rejecting guard. Guards after the rejecting one are never invoked.

    Raises:
        GuardEvaluationError: a guard raised, or returned something other
            than ``Continue`` or ``Reject``.
    """
    pipeline_start = time.perf_counter()
    outcome: Outcome | None = None

    try:
        for hook in hooks:
            await hook.on_pipeline_start(ctx)

        for guard in guards:
            guard_start = time.perf_counter()
            try:
                decision = await guard.check(ctx)
            except Exception as exc:
                logger.exception(
                    "Guard %r failed on route %r", guard.name, ctx.route
                )
                error = GuardEvaluationError(
                    "Guard evaluation failed", guard=guard.name, cause=exc
                )
                _record(trace, guard, guard_start, "ERROR", str(exc))
                if trace is not None:
                    trace.error = error
                raise error from exc

            if isinstance(decision, Reject):
                _record(trace, guard, guard_start, "REJECTED", decision.reason)
                rejection = Rejected(
                    reason=decision.reason,
                    status_code=decision.status_code,
                    guard=guard.name,
                )
                logger.info(
                    "Request rejected by guard %r",
                    guard.name,
                    extra={
                        "route": ctx.route,
                        "guard": guard.name,
                        "status_code": decision.status_code,
                    },
                )
                for hook in hooks:
                    await hook.on_guard(ctx, guard, rejection)
                outcome = rejection
                return outcome

            if not isinstance(decision, Continue):
                error = GuardEvaluationError(
                    f"Guard {guard.name!r} returned {decision!r}, "
                    "expected Continue or Reject",
                    guard=guard.name,
                )
                _record(trace, guard, guard_start, "ERROR", error.detail)
                if trace is not None:
                    trace.error = error
                logger.error(
                    "Guard %r returned %r on route %r",
                    guard.name,
                    decision,
                    ctx.route,
                )
                raise error

            _record(trace, guard, guard_start, "CONTINUE")
            logger.debug("Guard %r continued on route %r", guard.name, ctx.route)
            for hook in hooks:
                await hook.on_guard(ctx, guard, None)

        outcome = AUTHORIZED
        return outcome
    except GuardEvaluationError:
        raise
    except Exception as exc:
        if trace is not None:
            trace.error = GuardEvaluationError("Internal guard error", cause=exc)
        raise
    finally:
        if trace is not None:
            trace.total_duration_ms = (time.perf_counter() - pipeline_start) * 1000
            if outcome is None:
                trace.outcome = "ERROR"
            else:
                trace.outcome = "AUTHORIZED" if outcome.authorized else "REJECTED"
        for hook in hooks:
            await hook.on_pipeline_end(ctx, outcome)


def _record(
    trace: PipelineTrace | None,
    guard: Guard,
    started: float,
    outcome: str,
    reason: str | None = None,
) -> None:
    if trace is None:
        return
    trace.entries.append(
        TraceEntry(
            guard_name=guard.name,
            duration_ms=(time.perf_counter() - started) * 1000,
            outcome=outcome,  # type: ignore[arg-type]
            reason=reason,
        )
    )
