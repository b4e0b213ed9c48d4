"""Index, slice, split, compare and affix operations.

Each fallible operation is a single function that raises a `SliceError`
subclass (or `AffixMismatchError` for the strip functions); its ``try_``
counterpart is derived with `slicewise.results.ok` and returns ``None``
instead. Sources may be ``str``, `TextView` or any supported element
buffer; see `slicewise.core.views`.
"""

import warnings
from collections.abc import Buffer
from typing import Any

from slicewise.errors import AffixMismatchError, SliceError
from slicewise.results import ok

from .bounds import Span, check_half_open, check_index, resolve
from .index import At, IndexForm, coerce_index
from .ordering import Ordering
from .views import TextView, View, adapt, element_type, take

type Source = str | TextView | Buffer

# ============================================================================
#                               Helpers
# ============================================================================


def length(source: Source) -> int:
    """Number of elements in ``source`` (bytes, for text)."""
    return len(adapt(source))


def is_empty(source: Source) -> bool:
    """Return True if ``source`` has no elements."""
    return length(source) == 0


def _comparable(a: View, b: View) -> tuple[memoryview, memoryview]:
    match a, b:
        case TextView(), TextView():
            return a.data, b.data
        case memoryview(), memoryview():
            if element_type(a) != element_type(b):
                raise TypeError(
                    f"cannot compare element formats {a.format!r} and {b.format!r}"
                )
            return a, b
    raise TypeError("cannot compare text with an element sequence")


# ============================================================================
#                               Index / slice / split
# ============================================================================


def get(source: Buffer, index: int | At) -> Any:
    """Return the single element at ``index``.

    Raises:
        OutOfRangeError: If ``index`` is not below the source length.
        TypeError: If ``source`` is text; text only supports range forms.
    """
    view = adapt(source)
    if isinstance(view, TextView):
        raise TypeError("text does not support single-index lookup; use a range")
    form = coerce_index(index)
    if not isinstance(form, At):
        raise TypeError("get() takes a single offset; use subslice() for ranges")
    return view[check_index(len(view), form.index)]


def subslice(source: Source, index: IndexForm | slice) -> View:
    """Return the sub-view of ``source`` selected by a range form.

    Args:
        source: Text or an element buffer.
        index: Any range form, or a step-less Python ``slice``.

    Returns:
        A `TextView` for text sources, else a read-only ``memoryview``.

    Raises:
        StartAfterEndError: If the range is inverted.
        OutOfRangeError: If the range extends past the source.
        SplitsCodepointError: If a text boundary falls inside a codepoint.
    """
    form = coerce_index(index)
    if isinstance(form, At):
        raise TypeError("subslice() takes a range; use get() for single elements")
    view = adapt(source)
    return take(view, resolve(form, len(view)))


def split_at(source: Source, index: int) -> tuple[View, View]:
    """Split ``source`` into ``[0, index)`` and ``[index, len)``.

    Raises:
        OutOfRangeError: If ``index`` is past the end of the source.
        SplitsCodepointError: If ``index`` falls inside a codepoint of text.
    """
    mid = At(index).index
    view = adapt(source)
    left = check_half_open(len(view), 0, mid)
    return take(view, left), take(view, Span(mid, len(view)))


try_get = ok(get)
try_subslice = ok(subslice)
try_split_at = ok(split_at)


def split_slice_at(source: Source, index: int) -> tuple[View, View]:
    """Deprecated alias of `split_at`."""
    warnings.warn("renamed to split_at", DeprecationWarning, stacklevel=2)
    return split_at(source, index)


def try_split_slice_at(source: Source, index: int) -> tuple[View, View] | None:
    """Deprecated alias of `try_split_at`."""
    warnings.warn("renamed to try_split_at", DeprecationWarning, stacklevel=2)
    return try_split_at(source, index)


# ============================================================================
#                               Comparison
# ============================================================================


def compare(a: Source, b: Source) -> Ordering:
    """Lexicographically compare two sources of the same kind.

    Elements are compared pairwise up to the shorter length; the first
    mismatch decides. If one is a prefix of the other, the shorter is less.
    Text is compared by its UTF-8 bytes. Element buffers must agree in
    signedness and width, though not necessarily in format code: a numpy
    ``int64`` array compares with an ``array("q")``.

    Raises:
        TypeError: If the sources are of different kinds, or their elements
            differ in signedness or width.
    """
    lhs, rhs = _comparable(adapt(a), adapt(b))
    for x, y in zip(lhs, rhs):
        if x != y:
            return Ordering.of(x, y)
    return Ordering.of(len(lhs), len(rhs))


def partial_compare(a: Source, b: Source) -> Ordering | None:
    """Compare like `compare`; every supported element kind is totally ordered."""
    return compare(a, b)


def equals(a: Source, b: Source) -> bool:
    """Return True if both sources have the same length and elements."""
    return compare(a, b) is Ordering.EQUAL


# ============================================================================
#                               Prefix / suffix
# ============================================================================


def strip_prefix(source: Source, prefix: Source) -> View:
    """Return ``source`` without its leading ``prefix``.

    Raises:
        AffixMismatchError: If ``source`` does not start with ``prefix``.
    """
    view, affix = adapt(source), adapt(prefix)
    if len(view) < len(affix):
        raise AffixMismatchError("prefix")
    head, rest = split_at(view, len(affix))
    if not equals(head, affix):
        raise AffixMismatchError("prefix")
    return rest


def strip_suffix(source: Source, suffix: Source) -> View:
    """Return ``source`` without its trailing ``suffix``.

    Raises:
        AffixMismatchError: If ``source`` does not end with ``suffix``.
    """
    view, affix = adapt(source), adapt(suffix)
    if len(view) < len(affix):
        raise AffixMismatchError("suffix")
    rest, tail = split_at(view, len(view) - len(affix))
    if not equals(tail, affix):
        raise AffixMismatchError("suffix")
    return rest


try_strip_prefix = ok(strip_prefix, catch=(SliceError, AffixMismatchError))
try_strip_suffix = ok(strip_suffix, catch=(SliceError, AffixMismatchError))


def starts_with(source: Source, prefix: Source) -> bool:
    """Return True if ``source`` begins with ``prefix``."""
    return try_strip_prefix(source, prefix) is not None


def ends_with(source: Source, suffix: Source) -> bool:
    """Return True if ``source`` ends with ``suffix``."""
    return try_strip_suffix(source, suffix) is not None
