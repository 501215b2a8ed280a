"""Byte offset and line/column resolution with diff-based span relocation."""

__all__ = [
    "locations",
    "patching",
    "runtime",
]

__version__ = "0.1.0"
