"""PipelineHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi_route_guards.context import RequestContext
from fastapi_route_guards.guard import Guard
from fastapi_route_guards.outcome import Outcome, Rejected


class PipelineHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default.

    ``on_pipeline_end`` receives ``None`` when the run failed, including
    failures raised by a start hook.
    """

    async def on_pipeline_start(self, ctx: RequestContext) -> None:
        pass

    async def on_pipeline_end(
        self, ctx: RequestContext, outcome: Outcome | None
    ) -> None:
        pass

    async def on_guard(
        self,
        ctx: RequestContext,
        guard: Guard,
        rejection: Rejected | None,
    ) -> None:
        pass


class BeforePipeline(PipelineHook):
    """Convenience hook that only fires on pipeline start."""

    def __init__(self, callback: Callable[[RequestContext], Awaitable[None]]) -> None:
        self._callback = callback

    async def on_pipeline_start(self, ctx: RequestContext) -> None:
        await self._callback(ctx)


class AfterPipeline(PipelineHook):
    """Convenience hook that only fires on pipeline end."""

    def __init__(
        self,
        callback: Callable[[RequestContext, Outcome | None], Awaitable[None]],
    ) -> None:
        self._callback = callback

    async def on_pipeline_end(
        self, ctx: RequestContext, outcome: Outcome | None
    ) -> None:
        await self._callback(ctx, outcome)


class AfterGuard(PipelineHook):
    """Convenience hook that fires after each evaluated guard."""

    def __init__(
        self,
        callback: Callable[
            [RequestContext, Guard, Rejected | None], Awaitable[None]
        ],
    ) -> None:
        self._callback = callback

    async def on_guard(
        self,
        ctx: RequestContext,
        guard: Guard,
        rejection: Rejected | None,
    ) -> None:
        await self._callback(ctx, guard, rejection)
