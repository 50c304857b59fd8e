"""The inert record a computation yields to request an effect."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Action:
    """One requested effect: which effect, which operation, what arguments.

    Actions carry no behaviour. They are produced by action creators, consumed
    exactly once by the dispatch loop of ``handle`` (or by the top-level
    driver), and discarded afterwards.
    """

    effect_name: str
    constructor_name: str
    parameters: tuple[Any, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, tuple):
            object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def key(self) -> tuple[str, str]:
        return (self.effect_name, self.constructor_name)

    def __str__(self) -> str:
        return f"{self.effect_name}.{self.constructor_name}"


def is_action(value: Any) -> bool:
    return isinstance(value, Action)


__all__ = ["Action", "is_action"]
