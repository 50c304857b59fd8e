"""Console and log effects shared by the hyogwa test suite."""

from __future__ import annotations

from typing import Any

from hyogwa import Spec, create_effect
from hyogwa.tactics import HandleTactics


class ConsoleSpec(Spec, name="console"):
    prompt: str

    def read_line(self) -> str: ...

    def write_line(self, line: str) -> None: ...


Console = create_effect(ConsoleSpec)
Log = create_effect("log", "info")


def shout():
    """Read a line, write it back uppercased, complete with its length."""
    line = yield from Console.read_line()
    yield from Console.write_line(line.upper())
    return len(line)


class ConsoleRecorder:
    """Console handler table that answers reads from a script and records writes."""

    def __init__(self, *lines: str, prompt: str = "> ") -> None:
        self.lines = list(lines)
        self.written: list[str] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.prompt = prompt

    def read_line(self, tactics: HandleTactics) -> None:
        self.calls.append(("read_line", ()))
        tactics.resume(self.lines.pop(0))

    def write_line(self, line: str, tactics: HandleTactics) -> None:
        self.calls.append(("write_line", (line,)))
        self.written.append(line)
        tactics.resume(None)

    @property
    def table(self) -> dict[str, dict[str, Any]]:
        return {
            "console": {
                "prompt": self.prompt,
                "read_line": self.read_line,
                "write_line": self.write_line,
            }
        }


__all__ = ["Console", "ConsoleRecorder", "ConsoleSpec", "Log", "shout"]
