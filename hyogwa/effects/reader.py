"""Reader effect: read-only access to an environment of keyed values."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from hyogwa.effect import Spec, create_effect
from hyogwa.effectful import Effectful
from hyogwa.errors import MissingEnvKeyError
from hyogwa.handle import HandlerTable, handle
from hyogwa.tactics import HandleTactics

R = TypeVar("R")


class ReaderSpec(Spec, name="reader"):
    def ask(self, key: str) -> Any: ...


Reader = create_effect(ReaderSpec)


def reader_handlers(env: Mapping[str, Any] | None = None) -> HandlerTable:
    """Resolve ``ask`` from ``env``; a missing key raises MissingEnvKeyError."""

    environment = dict(env) if env else {}

    def ask(key: str, tactics: HandleTactics) -> None:
        if key not in environment:
            raise MissingEnvKeyError(key)
        tactics.resume(environment[key])

    return {ReaderSpec.__effect_name__: {"ask": ask}}


def _ask_outer(key: str, tactics: HandleTactics) -> Effectful[None]:
    tactics.resume((yield from Reader.ask(key)))


def local(
    overrides: Mapping[str, Any],
    source: Effectful[R] | Callable[[], Effectful[R]],
) -> Effectful[R]:
    """Run ``source`` with ``overrides`` shadowing the enclosing environment.

    Keys not overridden are asked of whatever handles the reader effect
    around the returned computation.
    """

    shadow = dict(overrides)

    def ask(key: str, tactics: HandleTactics) -> Effectful[None] | None:
        if key in shadow:
            tactics.resume(shadow[key])
            return None
        return _ask_outer(key, tactics)

    return handle(source, {ReaderSpec.__effect_name__: {"ask": ask}})


__all__ = ["Reader", "ReaderSpec", "local", "reader_handlers"]
