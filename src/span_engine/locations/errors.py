"""Errors raised for caller-supplied locations that cannot be normalized."""

from __future__ import annotations

from .models import Location


class InvalidLocationError(RuntimeError):
    """Raised when a SPAN location is structurally unusable."""

    def __init__(self, message: str, *, location: Location | None = None) -> None:
        super().__init__(f"invalid SPAN: {message}")
        self.location = location


class MissingSpanError(InvalidLocationError):
    """The span, or one of its endpoints, is absent."""


class InvertedSpanError(InvalidLocationError):
    """The normalized start lies after the normalized end."""

    def __init__(
        self, start: int, end: int, *, location: Location | None = None
    ) -> None:
        super().__init__(f"start ({start}) is after end ({end})", location=location)
        self.start = start
        self.end = end


__all__ = [
    "InvalidLocationError",
    "InvertedSpanError",
    "MissingSpanError",
]
