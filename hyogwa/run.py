"""Top-level drivers for fully handled computations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from hyogwa.effectful import Effectful, Suspended, advance, to_computation
from hyogwa.errors import UnhandledActionError
from hyogwa.trace import traced

T = TypeVar("T")


@dataclass
class RunResult(Generic[T]):
    value: T | None = None
    error: BaseException | None = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return cast(T, self.value)


def run(source: Effectful[T] | Callable[[], Effectful[T]]) -> T:
    """Drive a computation whose effects are all handled and return its result.

    Any action reaching this driver means the effect set was not fully
    discharged and raises :class:`~hyogwa.errors.UnhandledActionError`.
    """

    computation = to_computation(source)
    step = advance(computation)
    if isinstance(step, Suspended):
        raise UnhandledActionError(step.action)
    return step.result


def sync_run(source: Effectful[T] | Callable[[], Effectful[T]]) -> RunResult[T]:
    """Like :func:`run`, but report failures in the returned :class:`RunResult`."""

    try:
        return RunResult(value=run(source))
    except Exception as e:
        return RunResult(error=e)


def debug_run(
    source: Effectful[T] | Callable[[], Effectful[T]],
    max_steps: int = 1000,
) -> T:
    """Like :func:`run`, logging every step of ``source`` through loguru.

    Wrap the innermost computation, before any ``handle``, to see every
    action it performs::

        debug_run(lambda: handle(traced(program()), handlers))

    Applied to a handled computation, ``debug_run`` shows what reaches the
    top level.
    """

    return run(traced(source, label="debug_run", max_steps=max_steps))


__all__ = ["RunResult", "debug_run", "run", "sync_run"]
