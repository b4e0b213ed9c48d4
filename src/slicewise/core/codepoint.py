"""UTF-8 codepoint boundary checks.

A byte whose two high bits are ``10`` is a continuation byte: it is never the
first byte of a codepoint, so an offset pointing at one lies inside a
multi-byte sequence.
"""

from collections.abc import Sequence

from slicewise.errors import SplitsCodepointError

from .bounds import Span

CONTINUATION_MASK = 0xC0
CONTINUATION_TAG = 0x80


def is_continuation_byte(byte: int) -> bool:
    """Return True if ``byte`` is a UTF-8 continuation byte."""
    return byte & CONTINUATION_MASK == CONTINUATION_TAG


def is_char_boundary(data: Sequence[int], offset: int) -> bool:
    """Return True if ``offset`` does not fall inside a multi-byte sequence.

    Offsets at or past the end of ``data`` are boundaries.
    """
    return offset >= len(data) or not is_continuation_byte(data[offset])


def guard_span(data: Sequence[int], span: Span) -> Span:
    """Reject a bounds-checked span whose edges split a codepoint.

    Args:
        data: UTF-8 encoded bytes (indexable as ints).
        span: A span already validated against ``len(data)``.

    Returns:
        ``span`` unchanged.

    Raises:
        SplitsCodepointError: If ``span.start`` or ``span.stop`` lands on a
            continuation byte.
    """
    if not (is_char_boundary(data, span.start) and is_char_boundary(data, span.stop)):
        raise SplitsCodepointError(start=span.start, end=span.stop, length=len(data))
    return span
