"""Read-only, zero-copy views over caller-owned storage.

Two kinds of view are supported:

* **Element views** are one-dimensional, read-only ``memoryview`` objects over
  any buffer with a fixed-width integer, bool or char element format
  (``bytes``, ``bytearray``, ``array.array``, 1-D numpy arrays, ...).
* **Text views** (`TextView`) hold UTF-8 bytes that are valid end to end.

Sub-views of either kind reference the source's storage and never copy it.
"""

from collections.abc import Buffer

from .bounds import Span, check_half_open
from .codepoint import guard_span

# struct-module codes that memoryview can index and that are totally ordered
ELEMENT_FORMATS = frozenset("bBhHiIlLqQnN?c")


class TextView:
    """A read-only view of valid UTF-8 text.

    Offsets into a `TextView` are byte offsets into its UTF-8 encoding, and
    ``len()`` is the byte length. Construct one from a ``str``
    with `from_str`, or from UTF-8 bytes with the constructor (which
    validates them); views derived by slicing share the original storage.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Buffer) -> None:
        """Wrap existing UTF-8 storage without copying it.

        Args:
            data: A one-dimensional byte buffer holding valid UTF-8.

        Raises:
            UnicodeDecodeError: If ``data`` is not valid UTF-8.
            ValueError: If ``data`` is not a flat byte buffer.
        """
        view = memoryview(data)
        if view.ndim != 1 or view.format not in {"B", "b", "c"}:
            raise ValueError("UTF-8 text must be a one-dimensional byte buffer")
        view = view.cast("B").toreadonly()
        str(view, "utf-8")  # validate once; derived views never re-validate
        self._data = view

    @classmethod
    def _wrap(cls, view: memoryview) -> "TextView":
        # `view` is read-only, valid UTF-8 and codepoint-aligned at both edges
        text = cls.__new__(cls)
        text._data = view
        return text

    @classmethod
    def from_str(cls, text: str) -> "TextView":
        """Encode ``text`` once and wrap the resulting bytes."""
        return cls._wrap(memoryview(text.encode("utf-8")).toreadonly())

    @classmethod
    def from_utf8(cls, data: Buffer) -> "TextView":
        """Validate and wrap UTF-8 storage; same as calling `TextView` directly."""
        return cls(data)

    @property
    def data(self) -> memoryview:
        """The underlying read-only UTF-8 bytes."""
        return self._data

    def derive(self, span: Span) -> "TextView":
        """Return the sub-view covering ``span``.

        Raises:
            StartAfterEndError: If ``span`` is inverted.
            OutOfRangeError: If ``span`` extends past the view.
            SplitsCodepointError: If either edge falls inside a codepoint.
        """
        check_half_open(len(self._data), span.start, span.stop)
        guard_span(self._data, span)
        return TextView._wrap(self._data[span.start : span.stop])

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return str(self._data, "utf-8")

    def __bytes__(self) -> bytes:
        return self._data.tobytes()

    def __repr__(self) -> str:
        return f"TextView({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextView):
            return self._data == other._data
        if isinstance(other, str):
            return self._data == other.encode("utf-8")
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


type View = memoryview | TextView


def element_type(view: memoryview) -> tuple[str, int]:
    """Classify an element view as ``(category, itemsize)``.

    Category is ``"signed"``, ``"unsigned"``, ``"bool"`` or ``"char"``. Format
    codes naming the same category and width, such as ``"l"`` and ``"q"`` on
    64-bit Linux, classify the same.
    """
    code = view.format
    if code == "?":
        return "bool", view.itemsize
    if code == "c":
        return "char", view.itemsize
    return ("signed" if code.islower() else "unsigned"), view.itemsize


def as_elements(source: Buffer) -> memoryview:
    """Adapt a buffer into a read-only, one-dimensional element view.

    Raises:
        TypeError: If ``source`` has no buffer interface or its element
            format is not a fixed-width integer, bool or char.
        ValueError: If the buffer is not one-dimensional.
    """
    try:
        view = memoryview(source)
    except TypeError as e:
        raise TypeError(
            f"{type(source).__name__} does not expose a buffer of elements"
        ) from e
    if view.ndim != 1:
        raise ValueError(f"expected a one-dimensional buffer, got ndim={view.ndim}")
    if view.format not in ELEMENT_FORMATS:
        raise TypeError(f"unsupported element format {view.format!r}")
    return view.toreadonly()


def adapt(source: str | TextView | Buffer) -> View:
    """Adapt any supported source into a text view or an element view."""
    if isinstance(source, TextView):
        return source
    if isinstance(source, str):
        return TextView.from_str(source)
    return as_elements(source)


def take(view: View, span: Span) -> View:
    """Return the sub-view of ``view`` covering a bounds-checked ``span``.

    Text spans are additionally checked for codepoint alignment.
    """
    if isinstance(view, TextView):
        return view.derive(span)
    return view[span.start : span.stop]
