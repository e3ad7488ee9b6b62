from __future__ import annotations

from typing import Any


class VDWallError(Exception):
    """Base for all errors raised by the vdwall client."""


class UnknownAction(VDWallError, LookupError):
    """Raised when an action name is not one the device understands."""

    def __init__(self, action: str, known: tuple[str, ...] = ()) -> None:
        message = f"Unknown action '{action}'"
        if known:
            message += f". Valid: {list(known)}"
        super().__init__(message)
        self.action = action
        self.known = known


class ParameterOutOfRange(VDWallError, ValueError):
    """Raised when a command parameter is missing, not an integer, or outside its bounds."""

    def __init__(self, name: str, value: Any, low: int, high: int) -> None:
        super().__init__(f"{name} must be {low}-{high}, got {value!r}")
        self.name = name
        self.value = value
        self.low = low
        self.high = high
