"""Span containment checks used when filtering decorations."""

from __future__ import annotations

from enum import Enum
from typing import Any

from span_engine.runtime import telemetry

from .models import SpanKind


class BoundsCheck(str, Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    UNKNOWN_KIND = "unknown_kind"


def check_bounds(
    kind: SpanKind | Any,
    start: int,
    end: int,
    start_boundary: int,
    end_boundary: int,
) -> BoundsCheck:
    """Classify ``[start, end)`` against ``[start_boundary, end_boundary)``.

    ``WITHIN_SPAN`` asks whether the candidate lies inside the boundary,
    ``AROUND_SPAN`` whether it encloses it. Unrecognized kinds are reported
    as ``UNKNOWN_KIND`` rather than raising.
    """

    if kind == SpanKind.WITHIN_SPAN:
        holds = start >= start_boundary and end <= end_boundary
    elif kind == SpanKind.AROUND_SPAN:
        holds = start <= start_boundary and end >= end_boundary
    else:
        return BoundsCheck.UNKNOWN_KIND
    return BoundsCheck.INSIDE if holds else BoundsCheck.OUTSIDE


def in_bounds(
    kind: SpanKind | Any,
    start: int,
    end: int,
    start_boundary: int,
    end_boundary: int,
) -> bool:
    result = check_bounds(kind, start, end, start_boundary, end_boundary)
    if result is BoundsCheck.UNKNOWN_KIND:
        telemetry.record_event(
            "bounds::unknown_span_kind", level="warning", data={"kind": kind}
        )
        return False
    return result is BoundsCheck.INSIDE


__all__ = ["BoundsCheck", "check_bounds", "in_bounds"]
