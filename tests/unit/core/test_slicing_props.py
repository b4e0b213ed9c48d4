"""Hypothesis property tests for the slicing core.

These properties exercise the invariants every operation must keep:

- **Native agreement**: valid half-open and inclusive ranges select exactly
  what Python slicing selects; invalid ones fail with the right kind.
- **Codepoint safety**: a text slice succeeds iff both edges are codepoint
  boundaries, and its content is then the decoded byte range.
- **Split/concat inverse**: both halves of a split reconstruct the source.
- **Total order**: comparison agrees with Python's ordering of bytes and
  str, and is antisymmetric.
- **Strip round trip**: stripping a true prefix/suffix leaves the remainder.
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from slicewise.core.codepoint import is_char_boundary
from slicewise.core.index import Range, RangeInclusive
from slicewise.core.operations import (
    compare,
    equals,
    split_at,
    strip_prefix,
    strip_suffix,
    subslice,
    try_subslice,
)
from slicewise.core.ordering import Ordering
from slicewise.errors import OutOfRangeError, StartAfterEndError

pytestmark = [pytest.mark.property]

# Keep small for CI (~100), can be larger locally.
_PROPSET = settings(max_examples=100, deadline=None)

# ============================================================================
#                               Bounds
# ============================================================================


@_PROPSET
@given(payload=st.binary(max_size=64), data=st.data())
def test_valid_half_open_matches_native(payload: bytes, data: st.DataObject):
    """0 <= s <= e <= len selects payload[s:e]."""
    end = data.draw(st.integers(0, len(payload)))
    start = data.draw(st.integers(0, end))
    view = subslice(payload, Range(start, end))
    assert len(view) == end - start
    assert view == payload[start:end]


@_PROPSET
@given(payload=st.binary(min_size=1, max_size=64), data=st.data())
def test_valid_inclusive_matches_native(payload: bytes, data: st.DataObject):
    """0 <= s <= e < len selects payload[s:e + 1]."""
    end = data.draw(st.integers(0, len(payload) - 1))
    start = data.draw(st.integers(0, end))
    assert subslice(payload, RangeInclusive(start, end)) == payload[start : end + 1]


@_PROPSET
@given(payload=st.binary(max_size=32), start=st.integers(0, 64), end=st.integers(0, 64))
def test_invalid_ranges_fail_with_the_right_kind(payload: bytes, start: int, end: int):
    """Inverted ranges fail first; then ends past the length."""
    if start > end:
        expected: type[Exception] | None = StartAfterEndError
    elif end > len(payload):
        expected = OutOfRangeError
    else:
        expected = None

    if expected is None:
        assert subslice(payload, Range(start, end)) == payload[start:end]
    else:
        with pytest.raises(expected):
            subslice(payload, Range(start, end))

    if start <= end and end >= len(payload):
        with pytest.raises(OutOfRangeError):
            subslice(payload, RangeInclusive(start, end))


# ============================================================================
#                               Codepoints
# ============================================================================


@_PROPSET
@given(text=st.text(max_size=16), data=st.data())
def test_text_slices_never_split_codepoints(text: str, data: st.DataObject):
    """A text slice succeeds iff both edges are boundaries."""
    encoded = text.encode("utf-8")
    end = data.draw(st.integers(0, len(encoded)))
    start = data.draw(st.integers(0, end))

    result = try_subslice(text, Range(start, end))
    aligned = is_char_boundary(encoded, start) and is_char_boundary(encoded, end)
    assert (result is not None) is aligned
    if result is not None:
        assert str(result) == encoded[start:end].decode("utf-8")


# ============================================================================
#                               Split
# ============================================================================


@_PROPSET
@given(payload=st.binary(max_size=64), data=st.data())
def test_split_then_concat_bytes(payload: bytes, data: st.DataObject):
    """left + right == source for every valid offset."""
    index = data.draw(st.integers(0, len(payload)))
    left, right = split_at(payload, index)
    assert bytes(left) + bytes(right) == payload
    assert len(left) == index


@_PROPSET
@given(text=st.text(max_size=16), data=st.data())
def test_split_then_concat_text(text: str, data: st.DataObject):
    """Splitting text at a character boundary reconstructs it."""
    chars = data.draw(st.integers(0, len(text)))
    index = len(text[:chars].encode("utf-8"))
    left, right = split_at(text, index)
    assert str(left) + str(right) == text
    assert str(left) == text[:chars]


# ============================================================================
#                               Comparison
# ============================================================================


def _native(a: object, b: object) -> Ordering:
    return Ordering.of(a, b)


@_PROPSET
@given(a=st.binary(max_size=8), b=st.binary(max_size=8))
def test_compare_matches_bytes_ordering(a: bytes, b: bytes):
    """Byte comparison agrees with Python's bytes ordering and is antisymmetric."""
    assert compare(a, b) is _native(a, b)
    assert compare(b, a) is compare(a, b).reverse()
    assert equals(a, b) is (a == b)


@_PROPSET
@given(a=st.text(max_size=8), b=st.text(max_size=8))
def test_compare_matches_codepoint_ordering(a: str, b: str):
    """UTF-8 byte order is codepoint order, so text agrees with str ordering."""
    assert compare(a, b) is _native(a, b)
    assert equals(a, b) is (a == b)


# ============================================================================
#                               Strip
# ============================================================================


@_PROPSET
@given(prefix=st.text(max_size=8), rest=st.text(max_size=8))
def test_strip_prefix_round_trip(prefix: str, rest: str):
    """Stripping a true prefix yields the remainder; re-attaching restores it."""
    stripped = strip_prefix(prefix + rest, prefix)
    assert stripped == rest
    assert prefix + str(stripped) == prefix + rest


@_PROPSET
@given(rest=st.binary(max_size=16), suffix=st.binary(max_size=16))
def test_strip_suffix_round_trip(rest: bytes, suffix: bytes):
    """Stripping a true suffix yields the remainder."""
    assume(len(rest) + len(suffix) > 0)
    assert strip_suffix(rest + suffix, suffix) == rest
