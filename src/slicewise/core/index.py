"""Index forms accepted by the slicing operations.

An index is either a single offset (`At`) or one of six range forms:

* `Range(start, end)` — half-open ``[start, end)``
* `RangeInclusive(start, end)` — inclusive ``[start, end]``
* `RangeFrom(start)` — ``[start, len)``
* `RangeTo(end)` — ``[0, end)``
* `RangeToInclusive(end)` — ``[0, end]``
* `RangeFull()` — ``[0, len)``

All offsets are non-negative integers. The module also provides
`coerce_index` for Python `slice` objects and `parse_index` for the textual
range expressions accepted by the command line.
"""

import re
from dataclasses import dataclass

# pylint: disable=too-few-public-methods


def _check_offset(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful offset
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True, slots=True)
class At:
    """A single element offset."""

    index: int

    def __post_init__(self) -> None:
        _check_offset("index", self.index)


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open range ``[start, end)``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        _check_offset("start", self.start)
        _check_offset("end", self.end)


@dataclass(frozen=True, slots=True)
class RangeInclusive:
    """Inclusive range ``[start, end]``. There is no empty inclusive range."""

    start: int
    end: int

    def __post_init__(self) -> None:
        _check_offset("start", self.start)
        _check_offset("end", self.end)


@dataclass(frozen=True, slots=True)
class RangeFrom:
    """Range from ``start`` to the end of the source."""

    start: int

    def __post_init__(self) -> None:
        _check_offset("start", self.start)


@dataclass(frozen=True, slots=True)
class RangeTo:
    """Range from the beginning of the source up to ``end`` (exclusive)."""

    end: int

    def __post_init__(self) -> None:
        _check_offset("end", self.end)


@dataclass(frozen=True, slots=True)
class RangeToInclusive:
    """Range from the beginning of the source up to ``end`` (inclusive)."""

    end: int

    def __post_init__(self) -> None:
        _check_offset("end", self.end)


@dataclass(frozen=True, slots=True)
class RangeFull:
    """The whole source."""


type RangeForm = Range | RangeInclusive | RangeFrom | RangeTo | RangeToInclusive | RangeFull
type IndexForm = At | RangeForm

RANGE_FORMS = (Range, RangeInclusive, RangeFrom, RangeTo, RangeToInclusive, RangeFull)
INDEX_FORMS = (At, *RANGE_FORMS)


def coerce_index(value: IndexForm | int | slice) -> IndexForm:
    """Convert an ``int`` or a step-less ``slice`` into an index form.

    Args:
        value: An index form (returned unchanged), an ``int`` offset, or a
            Python ``slice`` whose step is ``None``.

    Returns:
        The equivalent index form.

    Raises:
        ValueError: If the slice has a step or a negative bound.
        TypeError: If the value cannot be interpreted as an index.
    """
    if isinstance(value, INDEX_FORMS):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return At(value)
    if isinstance(value, slice):
        if value.step is not None:
            raise ValueError("stepped slices are not supported")
        start, stop = value.start, value.stop
        match (start is None, stop is None):
            case (True, True):
                return RangeFull()
            case (False, True):
                return RangeFrom(start)
            case (True, False):
                return RangeTo(stop)
            case _:
                return Range(start, stop)
    raise TypeError(f"cannot use {type(value).__name__} as an index")


_RANGE_EXPR = re.compile(
    r"^\s*(?P<start>\d+)?\s*(?P<op>\.\.=?)\s*(?P<end>\d+)?\s*$"
)
_OFFSET_EXPR = re.compile(r"^\s*(?P<index>\d+)\s*$")


def parse_index(text: str) -> IndexForm:
    """Parse a textual index expression.

    Accepted forms: ``"3"``, ``"1..4"``, ``"1..=3"``, ``"2.."``, ``"..5"``,
    ``"..=4"`` and ``".."``.

    Args:
        text: The expression to parse.

    Returns:
        The matching index form.

    Raises:
        ValueError: If the expression is not one of the accepted forms.
    """
    if m := _OFFSET_EXPR.match(text):
        return At(int(m["index"]))
    if not (m := _RANGE_EXPR.match(text)):
        raise ValueError(f"invalid index expression: {text!r}")

    start = int(m["start"]) if m["start"] is not None else None
    end = int(m["end"]) if m["end"] is not None else None
    inclusive = m["op"] == "..="

    if inclusive:
        if end is None:
            raise ValueError(f"inclusive range needs an end: {text!r}")
        return RangeToInclusive(end) if start is None else RangeInclusive(start, end)
    if start is None:
        return RangeFull() if end is None else RangeTo(end)
    return RangeFrom(start) if end is None else Range(start, end)
