"""Writer effect: accumulate output messages alongside a computation."""

from __future__ import annotations

from typing import Any

from hyogwa.effect import Spec, create_effect
from hyogwa.handle import HandlerTable
from hyogwa.tactics import HandleTactics


class WriterSpec(Spec, name="writer"):
    def tell(self, message: Any) -> None: ...

    def listen(self) -> list[Any]: ...


Writer = create_effect(WriterSpec)


def writer_handlers() -> tuple[HandlerTable, list[Any]]:
    """Create handlers accumulating messages into a fresh list.

    Returns:
        Tuple of (handler table, messages). ``listen`` resumes with a copy of
        the messages told so far.
    """
    messages: list[Any] = []

    def tell(message: Any, tactics: HandleTactics) -> None:
        messages.append(message)
        tactics.resume(None)

    def listen(tactics: HandleTactics) -> None:
        tactics.resume(list(messages))

    return {WriterSpec.__effect_name__: {"tell": tell, "listen": listen}}, messages


__all__ = ["Writer", "WriterSpec", "writer_handlers"]
