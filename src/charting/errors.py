"""Structured errors raised by the charting label layer."""

from __future__ import annotations
from typing import Any


class ChartingError(Exception):
    """Base class for charting related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidArgumentError(ChartingError, ValueError):
    """Raised when a required argument is missing or malformed."""


def null_not_permitted(value: Any, name: str) -> None:
    """Raise ``InvalidArgumentError`` if ``value`` is ``None``."""
    if value is None:
        raise InvalidArgumentError(f"Null '{name}' argument.", context={"argument": name})
