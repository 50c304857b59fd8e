"""
hyogwa - Algebraic effects for Python generators.

Computations declare the actions they need performed, without saying how;
handler tables supply the how, later and elsewhere. Computations are plain
generators yielding actions, effects are namespaces of action creators, and
``handle`` resolves the actions a table claims while forwarding the rest.

Example:
    >>> from hyogwa import create_effect, handle, run
    >>>
    >>> Console = create_effect("console", "read_line", "write_line")
    >>>
    >>> def shout():
    ...     line = yield from Console.read_line()
    ...     yield from Console.write_line(line.upper())
    ...     return len(line)
    >>>
    >>> written = []
    >>> handlers = {
    ...     "console": {
    ...         "read_line": lambda tactics: tactics.resume("hi"),
    ...         "write_line": lambda line, tactics: (written.append(line), tactics.resume(None)),
    ...     }
    ... }
    >>> run(handle(shout(), handlers))
    2
"""

from hyogwa.action import Action, is_action
from hyogwa.effect import ActionCreator, Effect, Spec, create_effect, derive, operations_of
from hyogwa.effectful import (
    Completed,
    Effectful,
    StepResult,
    Suspended,
    advance,
    is_effectful,
    is_fresh,
    pure,
    to_computation,
)
from hyogwa.errors import HandleError, MissingEnvKeyError, UnhandledActionError
from hyogwa.handle import HandlerEntry, HandlerTable, freeze_handlers, handle, merge_handlers
from hyogwa.run import RunResult, debug_run, run, sync_run
from hyogwa.tactics import Abort, HandleTactics, Resume
from hyogwa.trace import traced

__version__ = "0.1.0"

__all__ = [
    # Actions and computations
    "Action",
    "Completed",
    "Effectful",
    "StepResult",
    "Suspended",
    "advance",
    "is_action",
    "is_effectful",
    "is_fresh",
    "pure",
    "to_computation",
    # Effects
    "ActionCreator",
    "Effect",
    "Spec",
    "create_effect",
    "derive",
    "operations_of",
    # Handling
    "Abort",
    "HandleTactics",
    "HandlerEntry",
    "HandlerTable",
    "Resume",
    "freeze_handlers",
    "handle",
    "merge_handlers",
    # Drivers
    "RunResult",
    "debug_run",
    "run",
    "sync_run",
    "traced",
    # Errors
    "HandleError",
    "MissingEnvKeyError",
    "UnhandledActionError",
]
