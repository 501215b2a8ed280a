"""Carry locations from one version of a text to the next."""

from __future__ import annotations

from typing import Optional

from span_engine.locations.models import Location, LocationKind, Span
from span_engine.locations.normalizer import Normalizer, require_span
from span_engine.runtime import telemetry
from span_engine.runtime.settings import DiffSettings

from .patcher import DiffPatcher, Patcher


class SpanRelocator:
    """Normalizes against the old text, patches, and re-renders on the new one."""

    def __init__(
        self,
        old_text: bytes | str,
        new_text: bytes | str,
        *,
        patcher: Optional[Patcher] = None,
        settings: Optional[DiffSettings] = None,
    ) -> None:
        self.source = Normalizer(old_text)
        self.target = Normalizer(new_text)
        if patcher is None:
            patcher = DiffPatcher.from_texts(old_text, new_text, settings=settings)
        self.patcher: Patcher = patcher

    def relocate_span(self, span: Optional[Span]) -> Optional[Span]:
        """Return ``span`` re-rendered in the new text, or ``None`` if it was edited away.

        Raises ``MissingSpanError`` when the span or either endpoint is absent.
        """

        required = require_span(span)
        normalized = Span(
            start=self.source.point(required.start), end=self.source.point(required.end)
        )
        result = self.patcher.patch_span(normalized)
        if not result.exists:
            return None
        return self.target.span_offsets(result.start, result.end)

    def relocate(self, loc: Location) -> Optional[Location]:
        """Return ``loc`` expressed in the new text, or ``None`` if it was edited away.

        Raises the ``InvalidLocationError`` family for malformed SPAN input.
        """

        normalized = self.source.location(loc)
        if normalized.kind == LocationKind.FILE:
            return normalized

        with telemetry.span(
            "relocate::location",
            component="patching",
            metadata={"ticket": loc.ticket},
        ) as handle:
            span = self.relocate_span(normalized.span)
            if span is None:
                handle.add_metadata("outcome", "missing")
                start, end = normalized.span.offsets if normalized.span else (0, 0)
                telemetry.record_event(
                    "relocate::span_missing",
                    level="debug",
                    data={"ticket": loc.ticket, "start": start, "end": end},
                )
                return None
            handle.add_metadata("outcome", "patched")
            return Location(ticket=normalized.ticket, kind=normalized.kind, span=span)


__all__ = ["SpanRelocator"]
