"""Exception types raised by the date helpers."""

from __future__ import annotations

from typing import Any


class DateProcessingError(Exception):
    """Base class for failures inside nenrei."""


class InvalidDateError(DateProcessingError, ValueError):
    """Raised when an input cannot be resolved to a calendar instant."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class ConfigurationError(DateProcessingError):
    """Raised when configuration loading encounters invalid values."""


__all__ = ["DateProcessingError", "InvalidDateError", "ConfigurationError"]
