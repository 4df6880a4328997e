from __future__ import annotations


class SpeedDialError(RuntimeError):
    """Base error for the speed-dial directory store."""


class LifecycleError(SpeedDialError):
    """Operation attempted in the wrong store lifecycle state."""


class NotInitializedError(LifecycleError):
    """Store is not initialized (or was already torn down)."""


class NotReadyError(NotInitializedError):
    """Store must be initialized before entries can be read or changed."""


class AlreadyInitializedError(LifecycleError):
    """initialize() called twice without an intervening teardown()."""


class PartitionNotFoundError(SpeedDialError):
    """No directory with the given name is configured."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Directory '{name}' does not exist")
        self.name = name


class PartitionFullError(SpeedDialError):
    """Directory reached its capacity."""

    def __init__(self, name: str, capacity: int) -> None:
        super().__init__(f"Directory '{name}' is full (max {capacity} numbers)")
        self.name = name
        self.capacity = capacity


class DuplicateCodeError(SpeedDialError):
    """Speed-dial code already present in the directory."""

    def __init__(self, name: str, code: str) -> None:
        super().__init__(f"Speed dial code '{code}' already exists in '{name}'")
        self.name = name
        self.code = code


class CodeNotFoundError(SpeedDialError):
    """Speed-dial code absent from the directory."""

    def __init__(self, name: str, code: str) -> None:
        super().__init__(f"Speed dial code '{code}' not found in '{name}'")
        self.name = name
        self.code = code


class InputTooLongError(SpeedDialError):
    """Input exceeds its configured maximum length; never truncated."""

    field = "input"

    def __init__(self, text: str, max_length: int) -> None:
        super().__init__(
            f"{self.field} is {len(text)} characters long (max {max_length})"
        )
        self.text = text
        self.max_length = max_length


class CodeTooLongError(InputTooLongError):
    field = "speed dial code"


class ValueTooLongError(InputTooLongError):
    field = "phone number"


__all__ = [
    "SpeedDialError",
    "LifecycleError",
    "NotInitializedError",
    "NotReadyError",
    "AlreadyInitializedError",
    "PartitionNotFoundError",
    "PartitionFullError",
    "DuplicateCodeError",
    "CodeNotFoundError",
    "InputTooLongError",
    "CodeTooLongError",
    "ValueTooLongError",
]
