"""Byte-length diff segments computed with diff-match-patch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from diff_match_patch import diff_match_patch

from span_engine.encoding import as_bytes
from span_engine.runtime import telemetry
from span_engine.runtime.settings import DiffSettings

# latin-1 maps every byte to exactly one code point, so character counts
# reported by diff_match_patch are byte counts.
_BYTE_CODEC = "latin-1"


class DiffOp(str, Enum):
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


_DMP_OPS = {
    diff_match_patch.DIFF_EQUAL: DiffOp.EQUAL,
    diff_match_patch.DIFF_INSERT: DiffOp.INSERT,
    diff_match_patch.DIFF_DELETE: DiffOp.DELETE,
}


@dataclass(frozen=True, slots=True)
class DiffSegment:
    """A run of ``length`` bytes that is kept, inserted, or deleted."""

    op: DiffOp
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError("segment length cannot be negative")
        object.__setattr__(self, "op", DiffOp(self.op))


def segments_from_pairs(pairs: Iterable[tuple[int, str]]) -> tuple[DiffSegment, ...]:
    """Convert ``diff_match_patch`` ``(op, text)`` tuples into segments."""

    return tuple(DiffSegment(_DMP_OPS[op], len(text)) for op, text in pairs)


def compute_diff(
    old_text: bytes | str,
    new_text: bytes | str,
    *,
    settings: Optional[DiffSettings] = None,
) -> tuple[DiffSegment, ...]:
    """Diff two texts and apply the efficiency cleanup pass."""

    resolved = settings or DiffSettings.from_env()
    old = as_bytes(old_text).decode(_BYTE_CODEC)
    new = as_bytes(new_text).decode(_BYTE_CODEC)

    with telemetry.span(
        "diff::compute",
        component="patching",
        metadata={"old_len": len(old), "new_len": len(new)},
    ) as handle:
        dmp = diff_match_patch()
        dmp.Diff_Timeout = resolved.timeout
        dmp.Diff_EditCost = resolved.edit_cost
        diffs = dmp.diff_main(old, new, resolved.checklines)
        dmp.diff_cleanupEfficiency(diffs)
        handle.add_metadata("segments", len(diffs))
        return segments_from_pairs(diffs)


def old_length(segments: Iterable[DiffSegment]) -> int:
    return sum(s.length for s in segments if s.op is not DiffOp.INSERT)


def new_length(segments: Iterable[DiffSegment]) -> int:
    return sum(s.length for s in segments if s.op is not DiffOp.DELETE)


__all__ = [
    "DiffOp",
    "DiffSegment",
    "compute_diff",
    "new_length",
    "old_length",
    "segments_from_pairs",
]
