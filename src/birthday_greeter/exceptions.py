"""Custom exceptions for the birthday_greeter package."""

from __future__ import annotations

from typing import Any


class GreeterError(Exception):
    """Base exception for all birthday_greeter errors."""


class ClockConfigError(GreeterError, ValueError):
    """Raised when a clock cannot be built from the values supplied."""


class InvalidInstantError(ClockConfigError):
    """Raised when an instant is malformed or lacks a UTC offset."""

    def __init__(self, value: Any, detail: str = "") -> None:
        self.value = value
        msg = f"Invalid instant {value!r}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class InvalidZoneError(ClockConfigError):
    """Raised when a time-zone identifier is unknown or malformed."""

    def __init__(self, zone: Any) -> None:
        self.zone = zone
        super().__init__(f"Unknown time zone {zone!r}")


class InvalidOffsetError(ClockConfigError):
    """Raised when a clock shift is not a ``timedelta``."""

    def __init__(self, offset: Any) -> None:
        self.offset = offset
        super().__init__(f"Invalid offset {offset!r}: expected a timedelta")
