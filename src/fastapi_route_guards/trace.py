"""PipelineTrace and TraceEntry — debug execution recording."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from fastapi_route_guards.exceptions import GuardEvaluationError


@dataclass(frozen=True)
class TraceEntry:
    """Single guard evaluation record."""

    guard_name: str
    duration_ms: float
    outcome: Literal["CONTINUE", "REJECTED", "ERROR"]
    reason: str | None = None


@dataclass
class PipelineTrace:
    """Structured record of a single pipeline run."""

    route: str | None = None
    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    outcome: Literal["PENDING", "AUTHORIZED", "REJECTED", "ERROR"] = "PENDING"
    error: GuardEvaluationError | None = None
