"""Helpers for moving between raising and ``None``-returning forms.

Every fallible slicewise operation is written once, as a function that
raises. `ok` derives the ``try_`` form that returns ``None`` instead, and
`expect_some` / `unwrap_some` go the other way for callers holding an
optional result.
"""

import functools
from collections.abc import Callable

from .errors import SliceError, UnwrapError

UNWRAPPED_NONE = "unwrapped None value"


def ok[**P, R](
    func: Callable[P, R],
    catch: tuple[type[Exception], ...] = (SliceError,),
) -> Callable[P, R | None]:
    """Derive a ``try_`` variant of ``func`` that returns ``None`` on failure.

    Args:
        func: The raising operation.
        catch: Exception types converted into ``None``. Anything else
            propagates.

    Returns:
        A function with the same parameters, named ``try_<name>``.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:
        try:
            return func(*args, **kwargs)
        except catch:
            return None

    wrapper.__name__ = f"try_{func.__name__}"
    wrapper.__qualname__ = f"try_{func.__qualname__}"
    wrapper.__doc__ = (
        f"Like `{func.__name__}`, but return ``None`` instead of raising.\n\n"
        f"{func.__doc__ or ''}"
    )
    return wrapper


def expect_some[T](value: T | None, message: str) -> T:
    """Return ``value``, or raise `UnwrapError` with ``message`` if it is None."""
    if value is None:
        raise UnwrapError(message)
    return value


def unwrap_some[T](value: T | None) -> T:
    """Return ``value``, or raise `UnwrapError` if it is None."""
    return expect_some(value, UNWRAPPED_NONE)
