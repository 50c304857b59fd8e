"""Effect specifications and effect constructors.

An effect is declared once, either by name and operation names::

    Console = create_effect("console", "read_line", "write_line")

or from a :class:`Spec` subclass, where public methods become operation-shaped
actions and public annotated attributes become value-shaped actions::

    class ConsoleSpec(Spec, name="console"):
        prompt: str

        def read_line(self) -> str: ...
        def write_line(self, line: str) -> None: ...

    Console = create_effect(ConsoleSpec)

    def program():
        prompt = yield from Console.prompt          # value-shaped
        line = yield from Console.read_line()       # operation-shaped
        yield from Console.write_line(prompt + line)

The operation table of an effect is built when the effect is created. An
effect created without any declared operation is open and accepts any
operation name on access.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Iterator
from typing import Any, ClassVar

from hyogwa.action import Action
from hyogwa.effectful import Effectful


class Spec:
    """Base class for effect specifications.

    The class body is a contract only; it is never instantiated. The effect
    name defaults to the class name and can be given with ``name=...``.
    """

    __effect_name__: ClassVar[str] = ""

    def __init_subclass__(cls, *, name: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if name is not None:
            cls.__effect_name__ = name
        elif "__effect_name__" not in cls.__dict__:
            cls.__effect_name__ = cls.__name__


def operations_of(spec: type[Spec]) -> tuple[str, ...]:
    """Collect the operation names declared by ``spec`` and its bases, in order."""

    names: dict[str, None] = {}
    for klass in reversed(spec.__mro__):
        if klass is Spec or klass is object or not issubclass(klass, Spec):
            continue
        for attr in inspect.get_annotations(klass):
            if not attr.startswith("_"):
                names[attr] = None
        for attr, member in vars(klass).items():
            if not attr.startswith("_") and inspect.isfunction(member):
                names[attr] = None
    return tuple(names)


class ActionCreator:
    """Builds computations that suspend once with an action of one operation.

    Calling the creator gives an operation-shaped computation carrying the
    call's arguments. Iterating it (``yield from creator``) gives a
    value-shaped computation without arguments. Either computation completes
    with whatever value it is resumed with.
    """

    __slots__ = ("effect_name", "constructor_name")

    def __init__(self, effect_name: str, constructor_name: str) -> None:
        self.effect_name = effect_name
        self.constructor_name = constructor_name

    def action(self, *parameters: Any) -> Action:
        return Action(self.effect_name, self.constructor_name, parameters)

    def __call__(self, *parameters: Any) -> Effectful[Any]:
        return (yield self.action(*parameters))

    def __iter__(self) -> Iterator[Action]:
        return (yield self.action())

    def __repr__(self) -> str:
        return f"ActionCreator({self.effect_name}.{self.constructor_name})"


class Effect:
    """Namespace of action creators for one effect name.

    Operations whose names clash with the namespace's own attributes
    (``derive``, ``operations``...) remain reachable as ``effect["derive"]``.

    An open effect answers every public attribute name: ``hasattr`` is always
    true for it, and each probed name is cached as an operation from then on.
    Declare the operations to get a closed effect.
    """

    def __init__(self, effect_name: str, operations: Iterable[str] = ()) -> None:
        if not isinstance(effect_name, str) or not effect_name:
            raise TypeError(f"Effect name must be a non-empty string, got {effect_name!r}")
        creators: dict[str, ActionCreator] = {}
        for operation in operations:
            if operation in creators:
                raise ValueError(f"Duplicate operation {operation!r} in effect {effect_name!r}")
            creators[operation] = ActionCreator(effect_name, operation)
        self._effect_name = effect_name
        self._creators = creators
        self._open = not creators

    @property
    def effect_name(self) -> str:
        return self._effect_name

    @property
    def operations(self) -> tuple[str, ...]:
        return tuple(self._creators)

    @property
    def is_open(self) -> bool:
        return self._open

    def derive(self, effect_name: str) -> Effect:
        """Return an effect with the same operations under another name."""

        derived = Effect(effect_name, self._creators)
        derived._open = self._open
        return derived

    def __getitem__(self, operation: str) -> ActionCreator:
        creator = self._creators.get(operation)
        if creator is not None:
            return creator
        if self._open:
            creator = ActionCreator(self._effect_name, operation)
            self._creators[operation] = creator
            return creator
        raise KeyError(operation)

    def __getattr__(self, operation: str) -> ActionCreator:
        if operation.startswith("_"):
            raise AttributeError(operation)
        try:
            return self[operation]
        except KeyError:
            raise AttributeError(
                f"Effect {self._effect_name!r} has no operation {operation!r}; "
                f"declared operations: {', '.join(self._creators) or '(none)'}"
            ) from None

    def __contains__(self, operation: object) -> bool:
        return operation in self._creators

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._creators))

    def __repr__(self) -> str:
        return f"Effect({self._effect_name!r}, operations={list(self._creators)!r})"


def create_effect(spec: str | type[Spec], *operations: str) -> Effect:
    """Create the effect described by a name or a :class:`Spec` subclass.

    Extra ``operations`` are added to those declared by the spec. With a bare
    name and no operations the returned effect is open.
    """

    if isinstance(spec, str):
        return Effect(spec, operations)
    if isinstance(spec, type) and issubclass(spec, Spec):
        declared = operations_of(spec)
        extra = tuple(op for op in operations if op not in declared)
        return Effect(spec.__effect_name__, declared + extra)
    raise TypeError(f"create_effect expects an effect name or a Spec subclass, got {spec!r}")


def derive(effect_name: str, source: Effect | type[Spec]) -> Effect:
    """Build a new effect named ``effect_name`` with the operations of ``source``."""

    if isinstance(source, Effect):
        return source.derive(effect_name)
    return create_effect(source).derive(effect_name)


__all__ = [
    "ActionCreator",
    "Effect",
    "Spec",
    "create_effect",
    "derive",
    "operations_of",
]
