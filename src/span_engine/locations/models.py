"""Plain value objects describing points, spans, and locations in a text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LocationKind(str, Enum):
    """Whether a location names a whole file or a span within it."""

    FILE = "file"
    SPAN = "span"


class SpanKind(str, Enum):
    """Containment relation checked by the boundary predicate."""

    WITHIN_SPAN = "within_span"
    AROUND_SPAN = "around_span"


@dataclass(frozen=True, slots=True)
class Point:
    """A position in a text.

    Zero means "unset" for every field, so ``Point(byte_offset=12)`` and
    ``Point(line_number=3, column_offset=1)`` are both valid inputs to the
    normalizer. Normalized points have all three fields populated.
    """

    byte_offset: int = 0
    line_number: int = 0
    column_offset: int = 0

    @property
    def line_column(self) -> tuple[int, int]:
        return (self.line_number, self.column_offset)


@dataclass(frozen=True, slots=True)
class Span:
    start: Optional[Point] = None
    end: Optional[Point] = None

    @property
    def offsets(self) -> tuple[int, int]:
        """Byte offsets of both endpoints; absent points count as 0."""

        start = self.start.byte_offset if self.start is not None else 0
        end = self.end.byte_offset if self.end is not None else 0
        return (start, end)


@dataclass(frozen=True, slots=True)
class Location:
    ticket: str = ""
    kind: LocationKind = LocationKind.FILE
    span: Optional[Span] = None


__all__ = [
    "Location",
    "LocationKind",
    "Point",
    "Span",
    "SpanKind",
]
