from __future__ import annotations

import pytest

from hyogwa import (
    Action,
    ActionCreator,
    Completed,
    Effect,
    Spec,
    Suspended,
    advance,
    create_effect,
    derive,
    operations_of,
)

from tests.fixtures_console import Console, ConsoleSpec


class TestSpec:
    def test_name_from_keyword(self):
        assert ConsoleSpec.__effect_name__ == "console"

    def test_name_defaults_to_class_name(self):
        class Clock(Spec):
            def now(self) -> float: ...

        assert Clock.__effect_name__ == "Clock"

    def test_operations_collect_methods_and_values_in_order(self):
        assert operations_of(ConsoleSpec) == ("prompt", "read_line", "write_line")

    def test_operations_include_inherited(self):
        class LoudConsole(ConsoleSpec, name="loud"):
            def shout(self, line: str) -> None: ...

        assert LoudConsole.__effect_name__ == "loud"
        assert operations_of(LoudConsole) == ("prompt", "read_line", "write_line", "shout")

    def test_private_members_are_not_operations(self):
        class Hidden(Spec, name="hidden"):
            _cache: dict

            def _helper(self) -> None: ...

            def visible(self) -> None: ...

        assert operations_of(Hidden) == ("visible",)


class TestActionCreators:
    def test_operation_shaped_suspends_with_parameters(self):
        computation = Console.write_line("hello")
        assert advance(computation) == Suspended(Action("console", "write_line", ("hello",)))
        assert advance(computation, None) == Completed(None)

    def test_operation_shaped_completes_with_resumption_value(self):
        computation = Console.read_line()
        assert advance(computation) == Suspended(Action("console", "read_line", ()))
        assert advance(computation, "typed") == Completed("typed")

    def test_value_shaped_via_iteration(self):
        def program():
            return (yield from Console.prompt)

        computation = program()
        assert advance(computation) == Suspended(Action("console", "prompt", ()))
        assert advance(computation, "$ ") == Completed("$ ")

    def test_each_call_builds_a_fresh_computation(self):
        first = Console.read_line()
        second = Console.read_line()
        assert first is not second
        advance(first)
        assert advance(second) == Suspended(Action("console", "read_line", ()))

    def test_creators_are_built_once(self):
        assert Console.read_line is Console.read_line
        assert isinstance(Console.read_line, ActionCreator)
        assert Console["read_line"] is Console.read_line

    def test_creator_action(self):
        assert Console.write_line.action("x") == Action("console", "write_line", ("x",))


class TestEffect:
    def test_create_from_names(self):
        effect = create_effect("clock", "now", "sleep")
        assert effect.effect_name == "clock"
        assert effect.operations == ("now", "sleep")
        assert not effect.is_open

    def test_create_from_spec_with_extra_operations(self):
        effect = create_effect(ConsoleSpec, "flush", "read_line")
        assert effect.operations == ("prompt", "read_line", "write_line", "flush")

    def test_closed_effect_rejects_undeclared_operation(self):
        with pytest.raises(AttributeError, match="has no operation 'missing'"):
            Console.missing
        with pytest.raises(KeyError):
            Console["missing"]

    def test_open_effect_accepts_any_operation(self):
        effect = create_effect("anything")
        assert effect.is_open
        computation = effect.whatever(1, 2)
        assert advance(computation) == Suspended(Action("anything", "whatever", (1, 2)))
        assert effect.whatever is effect.whatever
        assert "whatever" in effect

    def test_open_effect_caches_probed_names(self):
        effect = create_effect("anything")
        assert hasattr(effect, "probed")
        assert effect.operations == ("probed",)

    def test_duplicate_operation_rejected(self):
        with pytest.raises(ValueError, match="Duplicate operation"):
            Effect("clock", ["now", "now"])

    def test_invalid_name_rejected(self):
        with pytest.raises(TypeError):
            create_effect("")
        with pytest.raises(TypeError):
            create_effect(42)  # type: ignore[arg-type]

    def test_shadowed_operation_reachable_by_item(self):
        effect = create_effect("meta", "derive")
        assert advance(effect["derive"]()) == Suspended(Action("meta", "derive", ()))

    def test_private_names_are_not_operations(self):
        effect = create_effect("anything")
        with pytest.raises(AttributeError):
            effect._private

    def test_dir_lists_operations(self):
        assert {"prompt", "read_line", "write_line"} <= set(dir(Console))


class TestDerive:
    def test_derive_renames_effect(self):
        stderr = Console.derive("stderr")
        assert stderr.effect_name == "stderr"
        assert stderr.operations == Console.operations
        assert advance(stderr.write_line("x")) == Suspended(Action("stderr", "write_line", ("x",)))

    def test_derive_from_spec(self):
        stderr = derive("stderr", ConsoleSpec)
        assert stderr.operations == ("prompt", "read_line", "write_line")

    def test_derive_keeps_openness(self):
        assert derive("other", create_effect("open")).is_open
        assert not derive("other", Console).is_open
