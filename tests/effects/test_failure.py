from __future__ import annotations

import pytest

from hyogwa import handle, run
from hyogwa.effects import Failure, Writer, catch, failure_handlers, writer_handlers


def parse(text: str):
    if not text.isdigit():
        yield from Failure.throw(ValueError(f"not a number: {text}"))
    return int(text)


def checked_sum(*texts: str):
    total = 0
    for text in texts:
        total += yield from parse(text)
        yield from Writer.tell(total)
    return total


class TestCatch:
    def test_success_passes_through(self):
        assert run(catch(parse("12"), lambda error: -1)) == 12

    def test_throw_aborts_with_recovered_value(self):
        table, told = writer_handlers()
        program = catch(checked_sum("1", "2", "x", "4"), lambda error: str(error))
        assert run(handle(program, table)) == "not a number: x"
        assert told == [1, 3]

    def test_other_effects_are_forwarded(self):
        table, told = writer_handlers()
        assert run(handle(catch(checked_sum("5", "6"), repr), table)) == 11
        assert told == [5, 11]


class TestFailureHandlers:
    def test_throw_is_raised(self):
        with pytest.raises(ValueError, match="not a number: nope"):
            run(handle(parse("nope"), failure_handlers()))

    def test_success(self):
        assert run(handle(parse("7"), failure_handlers())) == 7
