"""Map byte spans from an old text onto a new text through a diff."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from span_engine.locations.models import Span
from span_engine.runtime.settings import DiffSettings

from .diff import DiffOp, DiffSegment, compute_diff


@dataclass(frozen=True, slots=True)
class PatchResult:
    start: int
    end: int
    exists: bool

    def __bool__(self) -> bool:
        return self.exists


MISSING = PatchResult(start=0, end=0, exists=False)


@dataclass(frozen=True, slots=True)
class IdentityPatcher:
    """Maps every well-formed span onto itself."""

    def patch(self, start: int, end: int) -> PatchResult:
        if start > end:
            return MISSING
        return PatchResult(start=start, end=end, exists=True)

    def patch_span(self, span: Span) -> PatchResult:
        return self.patch(*span.offsets)


@dataclass(frozen=True, slots=True)
class DiffPatcher:
    """Relocates spans that sit wholly inside one unchanged region.

    Spans that overlap an insertion or deletion are reported as missing
    instead of being approximated.
    """

    segments: tuple[DiffSegment, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))

    @classmethod
    def from_texts(
        cls,
        old_text: bytes | str,
        new_text: bytes | str,
        *,
        settings: Optional[DiffSettings] = None,
    ) -> "DiffPatcher":
        return cls(compute_diff(old_text, new_text, settings=settings))

    @classmethod
    def from_segments(cls, segments: Iterable[DiffSegment]) -> "DiffPatcher":
        return cls(tuple(segments))

    def patch(self, start: int, end: int) -> PatchResult:
        if start > end:
            return MISSING

        old_pos = new_pos = 0
        for segment in self.segments:
            if old_pos > start:
                return MISSING
            length = segment.length
            if segment.op is DiffOp.EQUAL:
                if old_pos <= start and end <= old_pos + length:
                    return PatchResult(
                        start=new_pos + (start - old_pos),
                        end=new_pos + (end - old_pos),
                        exists=True,
                    )
                old_pos += length
                new_pos += length
            elif segment.op is DiffOp.DELETE:
                old_pos += length
            else:
                new_pos += length
        return MISSING

    def patch_span(self, span: Span) -> PatchResult:
        return self.patch(*span.offsets)


Patcher = Union[IdentityPatcher, DiffPatcher]


def new_patcher(
    old_text: bytes | str,
    new_text: bytes | str,
    *,
    settings: Optional[DiffSettings] = None,
) -> DiffPatcher:
    """Build a patcher from the diff between ``old_text`` and ``new_text``."""

    return DiffPatcher.from_texts(old_text, new_text, settings=settings)


__all__ = [
    "DiffPatcher",
    "IdentityPatcher",
    "MISSING",
    "PatchResult",
    "Patcher",
    "new_patcher",
]
