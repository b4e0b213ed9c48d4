"""SLICEWISE

Safe, zero-copy slicing and comparison primitives for byte/integer buffers
and UTF-8 text. Every operation either returns a view into the caller's
storage or reports exactly why the request was rejected, and text views never
split a codepoint.
"""

from .core.index import (
    At,
    Range,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
    coerce_index,
    parse_index,
)
from .core.operations import (
    compare,
    ends_with,
    equals,
    get,
    is_empty,
    length,
    partial_compare,
    split_at,
    split_slice_at,
    starts_with,
    strip_prefix,
    strip_suffix,
    subslice,
    try_get,
    try_split_at,
    try_split_slice_at,
    try_strip_prefix,
    try_strip_suffix,
    try_subslice,
)
from .core.ordering import Ordering
from .core.views import TextView
from .errors import (
    AffixMismatchError,
    FailureKind,
    OutOfRangeError,
    SliceError,
    SlicewiseError,
    SplitsCodepointError,
    StartAfterEndError,
    UnwrapError,
)
from .results import expect_some, ok, unwrap_some

__all__ = [
    "__version__",
    "AffixMismatchError",
    "At",
    "FailureKind",
    "Ordering",
    "OutOfRangeError",
    "Range",
    "RangeFrom",
    "RangeFull",
    "RangeInclusive",
    "RangeTo",
    "RangeToInclusive",
    "SliceError",
    "SlicewiseError",
    "SplitsCodepointError",
    "StartAfterEndError",
    "TextView",
    "UnwrapError",
    "coerce_index",
    "compare",
    "ends_with",
    "equals",
    "expect_some",
    "get",
    "is_empty",
    "length",
    "ok",
    "parse_index",
    "partial_compare",
    "split_at",
    "split_slice_at",
    "starts_with",
    "strip_prefix",
    "strip_suffix",
    "subslice",
    "try_get",
    "try_split_at",
    "try_split_slice_at",
    "try_strip_prefix",
    "try_strip_suffix",
    "try_subslice",
    "unwrap_some",
]
__version__ = "0.1.0"
