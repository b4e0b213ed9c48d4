"""Error definitions for slicewise.

Every failure an operation can report is a subclass of `SlicewiseError`.
Slicing failures additionally carry a `FailureKind` so callers can branch on
the kind without matching on exception classes.
"""

from enum import Enum

# ============================================================================
#                               Failure kinds
# ============================================================================


class FailureKind(Enum):
    """Enumeration of the ways an index or range can be rejected."""

    START_AFTER_END = "start_after_end"
    OUT_OF_RANGE = "out_of_range"
    SPLITS_CODEPOINT = "splits_codepoint"


# ============================================================================
#                               Base errors
# ============================================================================


class SlicewiseError(Exception):
    """Base class for all slicewise errors."""


class SliceError(SlicewiseError):
    """Base class for rejected indices, ranges and split points.

    Attributes:
        kind: Which check rejected the request.
        start: Requested start offset (or single index), if known.
        end: Requested end offset, if known.
        length: Length of the source that was indexed, if known.
    """

    kind: FailureKind
    default_message: str = "invalid slice"

    def __init__(
        self,
        *,
        start: int | None = None,
        end: int | None = None,
        length: int | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.start = start
        self.end = end
        self.length = length


# ============================================================================
#                           Bounds and codepoint errors
# ============================================================================


class StartAfterEndError(SliceError):
    """Raised when a range's start offset exceeds its end offset."""

    kind = FailureKind.START_AFTER_END
    default_message = "slice index start is higher than end"


class OutOfRangeError(SliceError):
    """Raised when an index or range end lies beyond the source length."""

    kind = FailureKind.OUT_OF_RANGE
    default_message = "slice index out of range"


class SplitsCodepointError(SliceError):
    """Raised when a text boundary falls inside a multi-byte UTF-8 sequence."""

    kind = FailureKind.SPLITS_CODEPOINT
    default_message = "slice splits utf-8 codepoint"


# ============================================================================
#                               Other errors
# ============================================================================


class AffixMismatchError(SlicewiseError):
    """Raised when a source does not start (or end) with the requested affix."""

    def __init__(self, position: str) -> None:
        super().__init__(f"source does not have the requested {position}")
        self.position = position


class UnwrapError(SlicewiseError):
    """Raised when unwrapping an absent (``None``) result."""
