"""SLICEWISE slicing commands.

Thin shells over `slicewise.core.operations`: operands are parsed, the
raising form of the operation is called, and the result is written to
**stdout**. A rejected index, range or affix is reported on **stderr**,
logged at WARNING (which flushes the flight recorder), and the command exits
with status 1.

Operands are text unless ``--kind bytes`` is given or ``SLICEWISE_INPUT_KIND``
is set to ``bytes``, in which case they are hex strings (``"00 01 ff"``).

Examples
    $ slicewise slice "const slice" ..5
    const
    $ slicewise split "✨💖" 2
    ❌  slice splits utf-8 codepoint
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from slicewise import config
from slicewise.core import operations
from slicewise.core.index import At
from slicewise.errors import SliceError, SlicewiseError

from .helpers import IndexExpr, error, load_operand, render

if TYPE_CHECKING:
    from slicewise.core.index import IndexForm

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


def _resolve_kind(kind: str | None) -> config.InputKind:
    if kind is not None:
        return config.InputKind(kind.lower())
    try:
        return config.get_input_kind()
    except config.InvalidInputKindError as e:
        raise click.ClickException(str(e)) from e


def _describe(e: SlicewiseError) -> str:
    """One-line diagnostic for the log: failure kind plus the offsets involved."""
    if not isinstance(e, SliceError):
        return str(e)
    offsets = ", ".join(
        f"{name}={value}"
        for name, value in (("start", e.start), ("end", e.end), ("length", e.length))
        if value is not None
    )
    return f"{e.kind.value} ({offsets})"


def kind_option[F: Callable[..., Any]](func: F) -> F:
    """Add the ``--kind`` option and reject failures uniformly.

    The wrapped command receives an `InputKind` as ``kind``. Any
    `SlicewiseError` it raises is logged, printed to stderr and turned into
    exit status 1.
    """

    @click.option(
        "--kind",
        "kind",
        type=click.Choice([k.value for k in config.InputKind], case_sensitive=False),
        default=None,
        help=(
            "How to read operands: 'text' (UTF-8) or 'bytes' (hex). "
            f"Defaults to ${config.INPUT_KIND_ENV}, else 'text'."
        ),
    )
    @functools.wraps(func)
    def wrapper(*args: Any, kind: str | None, **kwargs: Any) -> Any:
        resolved = _resolve_kind(kind)
        logger.debug("Operand kind: %s", resolved.value)
        try:
            return func(*args, kind=resolved, **kwargs)
        except SlicewiseError as e:
            name = click.get_current_context().info_name
            logger.warning("%s rejected: %s", name, _describe(e))
            error(str(e))
            raise click.exceptions.Exit(EXIT_FAILURE) from e

    return wrapper  # type: ignore[return-value]


@click.command(name="get")
@click.argument("source")
@click.argument("index", type=click.IntRange(min=0))
@kind_option
def get_cmd(source: str, index: int, kind: config.InputKind) -> None:
    """Print the single element of SOURCE at INDEX (bytes only)."""
    if kind is config.InputKind.TEXT:
        raise click.UsageError("text does not support single-index lookup; use 'slice'")
    logger.debug("Looking up element %d of %r", index, source)
    element = operations.get(load_operand(source, kind), At(index))
    click.echo(render(element))


@click.command(name="slice")
@click.argument("source")
@click.argument("index", type=IndexExpr())
@kind_option
def slice_cmd(source: str, index: IndexForm, kind: config.InputKind) -> None:
    """Print the part of SOURCE selected by INDEX.

    INDEX is a range expression: 1..4, 1..=3, 2.., ..5, ..=4 or ..
    """
    if isinstance(index, At):
        raise click.BadParameter("expected a range, not a single offset", param_hint="INDEX")
    operand = load_operand(source, kind)
    logger.debug("Slicing %r with %r", source, index)
    view = operations.subslice(operand, index)
    logger.info("Selected %d of %d elements", len(view), operations.length(operand))
    click.echo(render(view))


@click.command(name="split")
@click.argument("source")
@click.argument("index", type=click.IntRange(min=0))
@kind_option
def split_cmd(source: str, index: int, kind: config.InputKind) -> None:
    """Split SOURCE at INDEX and print both halves, one per line."""
    logger.debug("Splitting %r at %d", source, index)
    left, right = operations.split_at(load_operand(source, kind), index)
    logger.info("Split into %d + %d elements", len(left), len(right))
    click.echo(render(left))
    click.echo(render(right))


@click.command(name="cmp")
@click.argument("a")
@click.argument("b")
@kind_option
def cmp_cmd(a: str, b: str, kind: config.InputKind) -> None:
    """Compare A with B and print less, equal or greater."""
    logger.debug("Comparing %r with %r", a, b)
    ordering = operations.compare(load_operand(a, kind), load_operand(b, kind))
    click.echo(ordering.name.lower())


@click.command(name="strip-prefix")
@click.argument("source")
@click.argument("prefix")
@kind_option
def strip_prefix_cmd(source: str, prefix: str, kind: config.InputKind) -> None:
    """Print SOURCE without its leading PREFIX."""
    logger.debug("Stripping prefix %r from %r", prefix, source)
    rest = operations.strip_prefix(load_operand(source, kind), load_operand(prefix, kind))
    click.echo(render(rest))


@click.command(name="strip-suffix")
@click.argument("source")
@click.argument("suffix")
@kind_option
def strip_suffix_cmd(source: str, suffix: str, kind: config.InputKind) -> None:
    """Print SOURCE without its trailing SUFFIX."""
    logger.debug("Stripping suffix %r from %r", suffix, source)
    rest = operations.strip_suffix(load_operand(source, kind), load_operand(suffix, kind))
    click.echo(render(rest))


@click.command(name="starts-with")
@click.argument("source")
@click.argument("prefix")
@kind_option
def starts_with_cmd(source: str, prefix: str, kind: config.InputKind) -> None:
    """Print true if SOURCE starts with PREFIX, else false."""
    found = operations.starts_with(load_operand(source, kind), load_operand(prefix, kind))
    click.echo(str(found).lower())


@click.command(name="ends-with")
@click.argument("source")
@click.argument("suffix")
@kind_option
def ends_with_cmd(source: str, suffix: str, kind: config.InputKind) -> None:
    """Print true if SOURCE ends with SUFFIX, else false."""
    found = operations.ends_with(load_operand(source, kind), load_operand(suffix, kind))
    click.echo(str(found).lower())


COMMANDS = (
    get_cmd,
    slice_cmd,
    split_cmd,
    cmp_cmd,
    strip_prefix_cmd,
    strip_suffix_cmd,
    starts_with_cmd,
    ends_with_cmd,
)
