"""Pass-through tracing of the actions flowing out of a computation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

from hyogwa.effectful import Effectful, Suspended, advance, to_computation

R = TypeVar("R")

trace_logger = logger.bind(component="hyogwa.trace")


def traced(
    source: Effectful[R] | Callable[[], Effectful[R]],
    *,
    label: str | None = None,
    max_steps: int | None = None,
) -> Effectful[R]:
    """Wrap ``source`` so every suspension and resumption is logged.

    The wrapper yields the same actions and forwards the same resumption
    values, so it can sit at any depth of a ``handle`` nesting. With
    ``max_steps`` set, a computation suspending more often than that raises
    ``RuntimeError``.
    """

    computation = to_computation(source)
    log = trace_logger.bind(label=label or getattr(computation, "__name__", "computation"))
    return _traced(computation, log, max_steps)


def _traced(computation: Effectful[R], log: Any, max_steps: int | None) -> Effectful[R]:
    steps = 0
    step = advance(computation)
    while isinstance(step, Suspended):
        steps += 1
        if max_steps is not None and steps > max_steps:
            raise RuntimeError(f"traced computation exceeded max_steps ({max_steps})")
        log.debug("step {}: suspended with {}", steps, step.action)
        value = yield step.action
        log.debug("step {}: resumed with {!r}", steps, value)
        step = advance(computation, value)
    log.debug("completed with {!r} after {} steps", step.result, steps)
    return step.result


__all__ = ["trace_logger", "traced"]
