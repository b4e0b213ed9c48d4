"""Unit tests for slicewise.core.codepoint."""

import pytest

from slicewise.core.bounds import Span
from slicewise.core.codepoint import guard_span, is_char_boundary, is_continuation_byte
from slicewise.errors import SplitsCodepointError

# "✨" = e2 9c a8, "💖" = f0 9f 92 96
EMOJI = "✨💖".encode("utf-8")


@pytest.mark.parametrize(
    "byte, expected",
    [(0x00, False), (0x7F, False), (0x80, True), (0xBF, True), (0xC0, False), (0xE2, False)],
)
def test_is_continuation_byte(byte, expected):
    """Only bytes of the form 0b10xxxxxx are continuation bytes."""
    assert is_continuation_byte(byte) is expected


@pytest.mark.parametrize(
    "offset, expected",
    [(0, True), (1, False), (2, False), (3, True), (4, False), (6, False), (7, True), (9, True)],
)
def test_is_char_boundary(offset, expected):
    """Offsets on lead bytes, or at/after the end, are boundaries."""
    assert is_char_boundary(EMOJI, offset) is expected


@pytest.mark.parametrize("span", [Span(0, 3), Span(3, 7), Span(0, 7), Span(7, 7), Span(3, 3)])
def test_guard_span_accepts_aligned_spans(span):
    """Aligned spans are returned unchanged."""
    assert guard_span(EMOJI, span) is span


@pytest.mark.parametrize("span", [Span(1, 3), Span(0, 2), Span(3, 5), Span(2, 2)])
def test_guard_span_rejects_split_codepoints(span):
    """A start or stop on a continuation byte raises SplitsCodepointError."""
    with pytest.raises(SplitsCodepointError, match="slice splits utf-8 codepoint"):
        guard_span(EMOJI, span)


def test_guard_span_works_on_memoryview():
    """The guard only needs integer indexing, so memoryviews work too."""
    with pytest.raises(SplitsCodepointError):
        guard_span(memoryview(EMOJI), Span(0, 1))
