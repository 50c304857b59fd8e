from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hyogwa.action import Action


class HandleError(RuntimeError):
    """Raised when a handler entry breaks the handle tactics contract."""

    def __init__(self, action: Action, reason: str) -> None:
        self.action = action
        self.reason = reason
        super().__init__(f"Fail to handle action '{action}'\n{reason}")


class UnhandledActionError(Exception):
    def __init__(self, action: Any) -> None:
        self.action = action
        super().__init__(f"No handler for action '{action}'")


class MissingEnvKeyError(KeyError):
    """Raised when the reader effect cannot find the requested key in the environment."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(
            f"Environment key not found: {key!r}\n"
            f"Hint: Provide this key via `reader_handlers({{'{key}': value}})`"
        )


__all__ = ["HandleError", "MissingEnvKeyError", "UnhandledActionError"]
