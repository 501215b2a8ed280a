"""Points, spans, locations, and the line index that normalizes them."""

from .bounds import BoundsCheck, check_bounds, in_bounds
from .errors import InvalidLocationError, InvertedSpanError, MissingSpanError
from .models import Location, LocationKind, Point, Span, SpanKind
from .normalizer import Normalizer, require_span

__all__ = [
    "BoundsCheck",
    "InvalidLocationError",
    "InvertedSpanError",
    "Location",
    "LocationKind",
    "MissingSpanError",
    "Normalizer",
    "Point",
    "Span",
    "SpanKind",
    "check_bounds",
    "in_bounds",
    "require_span",
]
