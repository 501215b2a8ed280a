from __future__ import annotations

import pytest

from span_engine.locations import Point, Span
from span_engine.patching import (
    MISSING,
    DiffOp,
    DiffPatcher,
    DiffSegment,
    IdentityPatcher,
    PatchResult,
    new_patcher,
)


def make_patcher() -> DiffPatcher:
    # old: "abcXXdefgh"  new: "abcYYYYdefgh"
    return DiffPatcher.from_segments(
        [
            DiffSegment(DiffOp.EQUAL, 3),
            DiffSegment(DiffOp.DELETE, 2),
            DiffSegment(DiffOp.INSERT, 4),
            DiffSegment(DiffOp.EQUAL, 5),
        ]
    )


@pytest.mark.parametrize(
    "span, expected",
    [
        ((0, 3), (0, 3)),
        ((1, 2), (1, 2)),
        ((3, 3), (3, 3)),
        ((5, 10), (7, 12)),
        ((6, 8), (8, 10)),
        ((5, 5), (7, 7)),
        ((10, 10), (12, 12)),
    ],
)
def test_spans_inside_equal_regions_are_shifted(
    span: tuple[int, int], expected: tuple[int, int]
) -> None:
    result = make_patcher().patch(*span)

    assert result == PatchResult(start=expected[0], end=expected[1], exists=True)


@pytest.mark.parametrize(
    "span",
    [
        (3, 5),  # deleted bytes
        (4, 4),  # inside the deletion
        (2, 6),  # straddles the edit
        (0, 10),  # covers everything
        (11, 12),  # past the old text
    ],
)
def test_edited_spans_no_longer_exist(span: tuple[int, int]) -> None:
    result = make_patcher().patch(*span)

    assert result is MISSING
    assert not result


def test_inverted_span_never_exists() -> None:
    assert make_patcher().patch(5, 3).exists is False
    assert IdentityPatcher().patch(5, 3).exists is False


def test_identity_patcher_returns_input() -> None:
    result = IdentityPatcher().patch(2, 9)

    assert result == PatchResult(start=2, end=9, exists=True)
    assert result


def test_empty_diff_maps_nothing() -> None:
    assert DiffPatcher(()).patch(0, 0) is MISSING


def test_repeated_queries_are_independent() -> None:
    patcher = make_patcher()

    first = patcher.patch(6, 8)
    patcher.patch(0, 1)
    patcher.patch(3, 5)

    assert patcher.patch(6, 8) == first


def test_patch_span_uses_byte_offsets() -> None:
    patcher = make_patcher()
    span = Span(start=Point(byte_offset=6, line_number=1, column_offset=6), end=Point(byte_offset=9))

    assert patcher.patch_span(span) == PatchResult(start=8, end=11, exists=True)
    assert IdentityPatcher().patch_span(Span(end=Point(byte_offset=4))) == PatchResult(
        start=0, end=4, exists=True
    )


def test_insertion_shifts_following_text() -> None:
    patcher = new_patcher(b"hello world", b"hello there world")

    assert patcher.patch(0, 5) == PatchResult(start=0, end=5, exists=True)
    assert patcher.patch(6, 11) == PatchResult(start=12, end=17, exists=True)


def test_deletion_removes_spans() -> None:
    patcher = new_patcher("hello cruel world", "hello world")

    assert patcher.patch(12, 17) == PatchResult(start=6, end=11, exists=True)
    assert patcher.patch(6, 11) is MISSING
    assert patcher.patch(4, 8) is MISSING


def test_unchanged_text_maps_every_span() -> None:
    text = b"line one\nline two\n"
    patcher = new_patcher(text, text)

    for start in range(len(text) + 1):
        assert patcher.patch(start, len(text)) == PatchResult(
            start=start, end=len(text), exists=True
        )
