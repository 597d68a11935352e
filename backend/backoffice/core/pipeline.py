"""Pipeline Executor — sequential stage composition with explicit short-circuit.

Invariants:
    - Stages run strictly in order, one at a time, within the caller's task
    - A stage returns Proceed (continue) or Respond (terminal response)
    - A DomainError raised by a stage becomes a terminal Respond; no later stage runs
    - Infrastructure errors (PersistenceError, anything else) propagate to the app handler
    - A pipeline that ends without a Respond is a programming error

Design Decisions:
    - Discriminated result over a side-effecting "send response" call: the executor,
      not the stage, decides whether work continues (ADR: explicit control flow)
    - RequestContext passed by reference: the only per-request mutable state
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from backoffice.core.errors import DomainError, PipelineExhaustedError
from backoffice.core.parameter_store import ParameterStore

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """Per-request state threaded through every stage."""
    body: dict[str, Any] | None = None
    params: ParameterStore = field(default_factory=ParameterStore)
    # Rows and row lists loaded by earlier stages, keyed by envelope name
    loaded: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Proceed:
    """Stage finished; run the next one."""


@dataclass(frozen=True)
class Respond:
    """Terminal response; no further stage runs."""
    status_code: int
    body: dict[str, Any] | None = None


PROCEED = Proceed()

StageResult = Proceed | Respond
Stage = Callable[[RequestContext], Awaitable[StageResult]]


def stage_name(stage: Stage) -> str:
    return getattr(stage, "__name__", type(stage).__name__)


async def run_pipeline(ctx: RequestContext, *stages: Stage) -> Respond:
    """Run stages in order until one responds or raises a DomainError."""
    for stage in stages:
        try:
            result = await stage(ctx)
        except DomainError as exc:
            logger.info(
                f"Pipeline halted at {stage_name(stage)}: {exc.message}",
                extra={
                    "error_code": exc.code,
                    "stage": stage_name(stage),
                    "status_code": exc.http_status,
                },
            )
            return Respond(exc.http_status, exc.to_response())
        if isinstance(result, Respond):
            return result
    raise PipelineExhaustedError(len(stages))
