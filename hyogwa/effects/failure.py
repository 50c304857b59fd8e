"""Failure effect: throw an error as an effect and decide elsewhere what it means.

``catch`` turns a throw into an early, substitute result by aborting the
handling; ``failure_handlers`` re-raises the error into the driver.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

from hyogwa.effect import Spec, create_effect
from hyogwa.effectful import Effectful
from hyogwa.handle import HandlerTable, handle
from hyogwa.tactics import HandleTactics

R = TypeVar("R")


class FailureSpec(Spec, name="failure"):
    def throw(self, error: BaseException) -> NoReturn: ...


Failure = create_effect(FailureSpec)


def catch(
    source: Effectful[R] | Callable[[], Effectful[R]],
    recover: Callable[[BaseException], Any],
) -> Effectful[Any]:
    """Complete with ``recover(error)`` as soon as ``source`` throws."""

    def throw(error: BaseException, tactics: HandleTactics) -> None:
        tactics.abort(recover(error))

    return handle(source, {FailureSpec.__effect_name__: {"throw": throw}})


def failure_handlers() -> HandlerTable:
    def throw(error: BaseException, tactics: HandleTactics) -> NoReturn:
        raise error

    return {FailureSpec.__effect_name__: {"throw": throw}}


__all__ = ["Failure", "FailureSpec", "catch", "failure_handlers"]
