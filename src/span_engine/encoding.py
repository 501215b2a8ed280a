"""Text input coercion shared by the line index and the diff adapter."""

from __future__ import annotations


def as_bytes(text: bytes | str) -> bytes:
    """Return ``text`` as bytes; ``str`` input is encoded as UTF-8."""

    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


__all__ = ["as_bytes"]
