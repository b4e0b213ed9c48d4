"""Bounds arithmetic for indices and ranges.

Pure functions that validate a requested index or range against a source
length and produce a half-open `Span`, or raise a `SliceError` subclass.
The start-after-end check always runs before the out-of-range check.
"""

from dataclasses import dataclass

from slicewise.errors import OutOfRangeError, StartAfterEndError

from .index import (
    Range,
    RangeForm,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
)


@dataclass(frozen=True, slots=True)
class Span:
    """A validated half-open range ``[start, stop)``."""

    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start


def check_half_open(length: int, start: int, end: int) -> Span:
    """Validate ``[start, end)`` against ``length``.

    Raises:
        StartAfterEndError: If ``start > end``.
        OutOfRangeError: If ``end > length``.
    """
    if start > end:
        raise StartAfterEndError(start=start, end=end, length=length)
    if end > length:
        raise OutOfRangeError(start=start, end=end, length=length)
    return Span(start, end)


def check_inclusive(length: int, start: int, end: int) -> Span:
    """Validate ``[start, end]`` against ``length``.

    The returned span is half-open, so its ``stop`` is ``end + 1``.

    Raises:
        StartAfterEndError: If ``start > end``.
        OutOfRangeError: If ``end >= length``.
    """
    if start > end:
        raise StartAfterEndError(start=start, end=end, length=length)
    if end >= length:
        raise OutOfRangeError(start=start, end=end, length=length)
    return Span(start, end + 1)


def check_index(length: int, index: int) -> int:
    """Validate a single element offset.

    Raises:
        OutOfRangeError: If ``index >= length``.
    """
    if index >= length:
        raise OutOfRangeError(start=index, length=length)
    return index


def resolve(index: RangeForm, length: int) -> Span:
    """Resolve any range form into a validated span.

    Args:
        index: One of the six range forms.
        length: Length of the source being sliced.

    Returns:
        The validated half-open span.

    Raises:
        StartAfterEndError: If the range is inverted.
        OutOfRangeError: If the range extends past the source.
        TypeError: If ``index`` is not a range form.
    """
    match index:
        case Range(start, end):
            return check_half_open(length, start, end)
        case RangeInclusive(start, end):
            return check_inclusive(length, start, end)
        case RangeFrom(start):
            return check_half_open(length, start, length)
        case RangeTo(end):
            return check_half_open(length, 0, end)
        case RangeToInclusive(end):
            return check_inclusive(length, 0, end)
        case RangeFull():
            return Span(0, length)
    raise TypeError(f"expected a range form, got {type(index).__name__}")
