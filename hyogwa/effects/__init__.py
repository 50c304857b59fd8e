"""Standard effects built on the public hyogwa API.

- State: get, put, modify (keyed mutable state)
- Reader: ask, plus ``local`` for scoped overrides
- Writer: tell, listen (output accumulation)
- Failure: throw, plus ``catch`` for early substitute results

Each effect comes with a handler table factory. They double as reference
implementations for user-defined effects.
"""

from hyogwa.effects.failure import Failure, FailureSpec, catch, failure_handlers
from hyogwa.effects.reader import Reader, ReaderSpec, local, reader_handlers
from hyogwa.effects.state import State, StateSpec, state_handlers
from hyogwa.effects.writer import Writer, WriterSpec, writer_handlers

__all__ = [
    "Failure",
    "FailureSpec",
    "Reader",
    "ReaderSpec",
    "State",
    "StateSpec",
    "Writer",
    "WriterSpec",
    "catch",
    "failure_handlers",
    "local",
    "reader_handlers",
    "state_handlers",
    "writer_handlers",
]
