"""One-shot continuation tactics handed to operation-shaped handler entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from hyogwa.action import Action
from hyogwa.errors import HandleError


@dataclass(frozen=True)
class Resume:
    """Hand ``value`` back to the suspended computation."""

    value: Any


@dataclass(frozen=True)
class Abort:
    """Stop the handled computation; the handling completes with ``value``."""

    value: Any


Outcome = Union[Resume, Abort]


class HandleTactics:
    """Single-use token bound to one action occurrence.

    Exactly one of :meth:`resume` or :meth:`abort` may be called, exactly once.
    The token only records the decision; the dispatch loop acts on it once the
    handler entry (and any computation it returned) has finished.
    """

    __slots__ = ("_action", "_outcome")

    def __init__(self, action: Action) -> None:
        self._action = action
        self._outcome: Outcome | None = None

    @property
    def action(self) -> Action:
        return self._action

    @property
    def outcome(self) -> Outcome | None:
        return self._outcome

    @property
    def settled(self) -> bool:
        return self._outcome is not None

    def resume(self, value: Any = None) -> None:
        self._settle(Resume(value))

    def abort(self, value: Any = None) -> None:
        self._settle(Abort(value))

    def _settle(self, outcome: Outcome) -> None:
        if self._outcome is not None:
            raise HandleError(self._action, "cannot call handle tactics more than once")
        self._outcome = outcome

    def __repr__(self) -> str:
        state = type(self._outcome).__name__ if self._outcome is not None else "pending"
        return f"HandleTactics({self._action}, {state})"


__all__ = ["Abort", "HandleTactics", "Outcome", "Resume"]
