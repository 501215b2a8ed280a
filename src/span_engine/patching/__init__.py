"""Diff segments, span patchers, and cross-version relocation."""

from .diff import DiffOp, DiffSegment, compute_diff
from .patcher import (
    MISSING,
    DiffPatcher,
    IdentityPatcher,
    PatchResult,
    Patcher,
    new_patcher,
)
from .relocate import SpanRelocator

__all__ = [
    "DiffOp",
    "DiffPatcher",
    "DiffSegment",
    "IdentityPatcher",
    "MISSING",
    "PatchResult",
    "Patcher",
    "SpanRelocator",
    "compute_diff",
    "new_patcher",
]
