"""State effect and handler table.

State operations provide keyed mutable state within a computation:
- get(key): the value for key, or None if missing
- put(key, value): store a value for key (resumes with None)
- modify(key, func): store func(current) and resume with the new value

Usage:
    from hyogwa import handle, run
    from hyogwa.effects import State, state_handlers

    def program():
        yield from State.put("counter", 0)
        yield from State.modify("counter", lambda n: n + 1)
        return (yield from State.get("counter"))

    table, store = state_handlers()
    run(handle(program(), table))
    # == 1, and store == {"counter": 1}
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hyogwa.effect import Spec, create_effect
from hyogwa.handle import HandlerTable
from hyogwa.tactics import HandleTactics


class StateSpec(Spec, name="state"):
    def get(self, key: str) -> Any: ...

    def put(self, key: str, value: Any) -> None: ...

    def modify(self, key: str, func: Callable[[Any], Any]) -> Any: ...


State = create_effect(StateSpec)


def state_handlers(
    initial: dict[str, Any] | None = None,
) -> tuple[HandlerTable, dict[str, Any]]:
    """Create handlers over a fresh store seeded from ``initial``.

    Returns:
        Tuple of (handler table, store); the store is the live dict the
        handlers read and write, for inspection after the run.
    """
    store: dict[str, Any] = dict(initial) if initial else {}

    def get(key: str, tactics: HandleTactics) -> None:
        tactics.resume(store.get(key))

    def put(key: str, value: Any, tactics: HandleTactics) -> None:
        store[key] = value
        tactics.resume(None)

    def modify(key: str, func: Callable[[Any], Any], tactics: HandleTactics) -> None:
        new_value = func(store.get(key))
        store[key] = new_value
        tactics.resume(new_value)

    table = {StateSpec.__effect_name__: {"get": get, "put": put, "modify": modify}}
    return table, store


__all__ = ["State", "StateSpec", "state_handlers"]
