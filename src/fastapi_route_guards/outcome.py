"""Guard decisions and pipeline outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Literal, Union


class PipelineState(Enum):
    """States of a single pipeline run. Terminal on the first transition."""

    PENDING = "pending"
    AUTHORIZED = "authorized"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Continue:
    """Guard decision: let the request proceed to the next guard."""

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE = Continue()


@dataclass(frozen=True)
class Reject:
    """Guard decision: halt the pipeline with a reason and status code."""

    reason: str
    status_code: int = 401


@dataclass(frozen=True)
class Authorized:
    """Every effective guard continued; the action handler may run."""

    state: ClassVar[PipelineState] = PipelineState.AUTHORIZED
    authorized: ClassVar[Literal[True]] = True


@dataclass(frozen=True)
class Rejected:
    """A guard rejected the request; the action handler must not run."""

    state: ClassVar[PipelineState] = PipelineState.REJECTED
    authorized: ClassVar[Literal[False]] = False

    reason: str
    status_code: int
    guard: str


Outcome = Union[Authorized, Rejected]


AUTHORIZED = Authorized()
