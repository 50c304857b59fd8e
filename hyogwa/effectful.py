"""Effectful computations and single-step driving.

An effectful computation is a plain Python generator that yields
:class:`~hyogwa.action.Action` values and returns its result::

    def greet():
        name = yield from Console.read_line()
        yield from Console.write_line(f"hello {name}")
        return len(name)

Each ``yield`` is a suspension point: the driver receives the action and later
sends back exactly one resumption value. Once the generator returns, the
computation is terminal and must not be driven again.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union, cast

from hyogwa.action import Action

R = TypeVar("R")

Effectful = Generator[Action, Any, R]


@dataclass(frozen=True)
class Suspended:
    action: Action


@dataclass(frozen=True)
class Completed(Generic[R]):
    result: R


StepResult = Union[Suspended, Completed[Any]]


def is_effectful(obj: Any) -> bool:
    """Return ``True`` when ``obj`` can be driven as a computation.

    Only native generators qualify: their first drive is detectable, so the
    resumption value of that drive can be ignored.
    """

    return inspect.isgenerator(obj)


def to_computation(source: Effectful[R] | Callable[[], Effectful[R]]) -> Effectful[R]:
    """Accept a ready computation or a zero-argument producer of one."""

    if inspect.isgenerator(source):
        return cast(Effectful[R], source)
    if callable(source):
        produced = source()
        if inspect.isgenerator(produced):
            return cast(Effectful[R], produced)
        raise TypeError(
            f"Computation producer did not return a generator, got {type(produced).__name__}"
        )
    raise TypeError(f"Cannot convert {type(source).__name__} to an effectful computation")


def is_fresh(computation: Effectful[Any]) -> bool:
    return inspect.getgeneratorstate(computation) == inspect.GEN_CREATED


def advance(computation: Effectful[Any], value: Any = None) -> StepResult:
    """Drive ``computation`` by one step.

    The resumption ``value`` is ignored on the first advance of a fresh
    computation. Exceptions raised by the computation body propagate.
    """

    if not inspect.isgenerator(computation):
        raise TypeError(f"Cannot advance {type(computation).__name__}; expected a generator")
    try:
        if is_fresh(computation):
            yielded = next(computation)
        else:
            yielded = computation.send(value)
    except StopIteration as stop:
        return Completed(stop.value)
    return Suspended(yielded)


def pure(value: R) -> Effectful[R]:
    """A computation that completes with ``value`` without suspending."""

    return value
    yield  # type: ignore[unreachable]


__all__ = [
    "Completed",
    "Effectful",
    "StepResult",
    "Suspended",
    "advance",
    "is_effectful",
    "is_fresh",
    "pure",
    "to_computation",
]
