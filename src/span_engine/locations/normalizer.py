"""Line index that makes points, spans, and locations self-consistent."""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate
from typing import Optional, Sequence

from span_engine.encoding import as_bytes
from span_engine.runtime import telemetry

from .errors import InvertedSpanError, MissingSpanError
from .models import Location, LocationKind, Point, Span

LINE_END = b"\n"


def require_span(span: Optional[Span], *, location: Optional[Location] = None) -> Span:
    """Return ``span`` if both endpoints are present, else raise ``MissingSpanError``."""

    if span is None:
        raise MissingSpanError("missing span", location=location)
    if span.start is None:
        raise MissingSpanError("missing span start point", location=location)
    if span.end is None:
        raise MissingSpanError("missing span end point", location=location)
    return span


class Normalizer:
    """Resolves points within one fixed text.

    Every line, including the last one, is counted with one terminator byte,
    and a trailing newline yields a final empty line. This keeps the
    maximum column of the last line pointing at ``len(text)``.
    """

    def __init__(self, text: bytes | str) -> None:
        data = as_bytes(text)
        with telemetry.span(
            "normalizer::index",
            component="locations",
            metadata={"text_len": len(data)},
        ) as handle:
            lines = data.split(LINE_END)
            self._text_len = len(data)
            self._line_len: Sequence[int] = tuple(
                len(line) + len(LINE_END) for line in lines
            )
            self._prefix_len: Sequence[int] = tuple(
                accumulate(self._line_len[:-1], initial=0)
            )
            handle.add_metadata("lines", len(self._line_len))

    @property
    def text_len(self) -> int:
        return self._text_len

    @property
    def line_count(self) -> int:
        return len(self._line_len)

    @property
    def line_lengths(self) -> Sequence[int]:
        return self._line_len

    @property
    def line_offsets(self) -> Sequence[int]:
        return self._prefix_len

    def byte_offset(self, offset: int) -> Point:
        """Return the point at ``offset`` clamped into ``[0, len(text)]``."""

        offset = min(max(offset, 0), self._text_len)
        line = bisect_right(self._prefix_len, offset)
        return Point(
            byte_offset=offset,
            line_number=line,
            column_offset=offset - self._prefix_len[line - 1],
        )

    def point(self, p: Optional[Point]) -> Optional[Point]:
        """Return ``p`` with all fields populated and clamped.

        A positive byte offset wins over line/column. Lines past the end land
        on the last line's final column; columns are clamped to the line's
        content plus terminator.
        """

        if p is None:
            return None

        if p.byte_offset > 0:
            return self.byte_offset(p.byte_offset)

        if p.line_number > 0:
            line, column = p.line_number, p.column_offset
            if line > self.line_count:
                line = self.line_count
                column = self._line_len[line - 1] - 1

            max_column = self._line_len[line - 1] - 1
            if column < 0:
                column = 0
            elif column > max_column:
                column = max_column

            return Point(
                byte_offset=self._prefix_len[line - 1] + column,
                line_number=line,
                column_offset=column,
            )

        return Point(line_number=1)

    def span(self, s: Optional[Span]) -> Optional[Span]:
        """Normalize both endpoints; ordering is left to ``location``."""

        if s is None:
            return None
        return Span(start=self.point(s.start), end=self.point(s.end))

    def span_offsets(self, start: int, end: int) -> Span:
        return Span(start=self.byte_offset(start), end=self.byte_offset(end))

    def location(self, loc: Optional[Location]) -> Location:
        """Return a normalized copy of ``loc``.

        FILE locations lose any span. SPAN locations must carry both
        endpoints and must not be inverted once normalized.
        """

        if loc is None:
            return Location()
        if loc.kind == LocationKind.FILE:
            return Location(ticket=loc.ticket, kind=loc.kind)

        required = require_span(loc.span, location=loc)
        span = Span(start=self.point(required.start), end=self.point(required.end))
        start, end = span.offsets
        if start > end:
            raise InvertedSpanError(start, end, location=loc)
        return Location(ticket=loc.ticket, kind=loc.kind, span=span)


__all__ = ["Normalizer", "require_span"]
