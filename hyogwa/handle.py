"""The dispatch loop resolving a computation's actions through a handler table.

A handler table maps an effect name to a mapping from operation name to an
entry. An entry is either a plain value, substituted for value-shaped
actions, or a function receiving the action's parameters followed by a
:class:`~hyogwa.tactics.HandleTactics`::

    handlers = {
        "console": {
            "prompt": "> ",
            "read_line": lambda tactics: tactics.resume("hi"),
            "write_line": lambda line, tactics: tactics.resume(None),
        }
    }

    handled = handle(program(), handlers)

A handler function may return a computation of its own. That computation is
driven before the handler's decision is applied, and every action it yields
is forwarded to the enclosing context, never to the table currently
handling. ``handle`` returns a new computation whose suspensions are exactly
the actions the table did not resolve, so handling composes by nesting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar, cast

from frozendict import frozendict

from hyogwa.action import Action
from hyogwa.effectful import (
    Completed,
    Effectful,
    Suspended,
    advance,
    is_effectful,
    to_computation,
)
from hyogwa.errors import HandleError
from hyogwa.tactics import Abort, HandleTactics

logger = logging.getLogger(__name__)

R = TypeVar("R")

HandlerEntry = Any
HandlerTable = Mapping[str, Mapping[str, HandlerEntry]]
FrozenHandlerTable = frozendict  # frozendict[str, frozendict[str, HandlerEntry]]


def freeze_handlers(handlers: HandlerTable) -> FrozenHandlerTable:
    """Snapshot ``handlers`` into a read-only two-level table."""

    if not isinstance(handlers, Mapping):
        raise TypeError(f"Handler table must be a mapping, got {type(handlers).__name__}")
    frozen: dict[str, frozendict] = {}
    for effect_name, entries in handlers.items():
        if not isinstance(entries, Mapping):
            raise TypeError(
                f"Handlers of effect {effect_name!r} must be a mapping, "
                f"got {type(entries).__name__}"
            )
        frozen[effect_name] = frozendict(entries)
    return frozendict(frozen)


def merge_handlers(*tables: HandlerTable) -> dict[str, dict[str, HandlerEntry]]:
    """Merge handler tables per effect; later entries win for the same operation."""

    merged: dict[str, dict[str, HandlerEntry]] = {}
    for table in tables:
        for effect_name, entries in table.items():
            merged.setdefault(effect_name, {}).update(entries)
    return merged


def lookup(handlers: FrozenHandlerTable, action: Any) -> tuple[bool, HandlerEntry]:
    """Find the entry for ``action``; anything that is not an Action never matches."""

    if not isinstance(action, Action):
        return False, None
    entries = handlers.get(action.effect_name)
    if entries is None or action.constructor_name not in entries:
        return False, None
    return True, entries[action.constructor_name]


def _handle(computation: Effectful[R], handlers: FrozenHandlerTable) -> Effectful[R]:
    step = advance(computation)

    while isinstance(step, Suspended):
        action = step.action
        found, entry = lookup(handlers, action)

        if not found:
            logger.debug("forwarding unhandled action %s", action)
            step = advance(computation, (yield action))
            continue

        if not callable(entry):
            logger.debug("resolved value action %s", action)
            step = advance(computation, entry)
            continue

        tactics = HandleTactics(action)
        nested = entry(*action.parameters, tactics)
        if is_effectful(nested):
            logger.debug("driving handler body of %s", action)
            yield from nested

        outcome = tactics.outcome
        if outcome is None:
            raise HandleError(action, "Effect handlers must call handle tactics")
        if isinstance(outcome, Abort):
            logger.debug("handling aborted at %s", action)
            return outcome.value

        logger.debug("resumed %s", action)
        step = advance(computation, outcome.value)

    return cast(Completed, step).result


def handle(
    first: Effectful[R] | Callable[[], Effectful[R]] | HandlerTable,
    second: Effectful[R] | Callable[[], Effectful[R]] | HandlerTable,
) -> Effectful[R]:
    """Resolve some effects of a computation by attaching a handler table.

    Accepts ``handle(computation, handlers)``, ``handle(handlers, computation)``
    and ``handle(handlers, lambda: computation)``. The computation must be
    fresh; ``handle`` owns it from now on. Handler entries must settle every
    action they claim with exactly one tactic, otherwise
    :class:`~hyogwa.errors.HandleError` is raised while driving the result.

    Returns:
        A fresh computation completing with the original result, or with the
        value passed to ``abort``.
    """

    if isinstance(second, Mapping):
        source, handlers = first, second
    elif isinstance(first, Mapping):
        handlers, source = first, second
    else:
        raise TypeError(
            "handle expects a computation and a handler table, got "
            f"{type(first).__name__} and {type(second).__name__}"
        )
    return _handle(to_computation(source), freeze_handlers(handlers))


__all__ = [
    "FrozenHandlerTable",
    "HandlerEntry",
    "HandlerTable",
    "freeze_handlers",
    "handle",
    "lookup",
    "merge_handlers",
]
