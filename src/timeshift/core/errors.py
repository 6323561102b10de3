"""Exception types for the timeshift engine."""

from __future__ import annotations


class TimeshiftError(Exception):
    """Base class for all timeshift errors."""


class InvalidTimeSpecError(TimeshiftError, ValueError):
    """Raised when a time spec or scale factor cannot be resolved."""


class SafeModeError(TimeshiftError):
    """Raised when a permanent override is attempted while safe mode is on."""

    def __init__(self) -> None:
        super().__init__("Safe mode is enabled, only scoped calls are allowed.")


class VirtualTimeRangeError(TimeshiftError, OverflowError):
    """Raised when a frame's virtual time runs past the datetime range."""
