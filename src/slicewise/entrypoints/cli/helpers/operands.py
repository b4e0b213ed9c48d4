"""Operand parsing and result rendering for the slicewise CLI.

Text operands are used as given. Byte operands are hex strings such as
``"00 01 ff"`` (whitespace between byte pairs is optional). Results are
rendered back the same way: text views as text, element views as spaced
hex.
"""

from typing import Any

import click

from slicewise.config import InputKind
from slicewise.core.index import IndexForm, parse_index
from slicewise.core.views import TextView


class IndexExpr(click.ParamType):
    """Click parameter type for index expressions like ``1..=3`` or ``..5``."""

    name = "index"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> IndexForm:
        if not isinstance(value, str):
            return value
        try:
            return parse_index(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


def load_operand(value: str, kind: InputKind) -> str | bytes:
    """Interpret a command-line operand according to ``kind``.

    Raises:
        click.BadParameter: If a bytes operand is not valid hex.
    """
    if kind is InputKind.TEXT:
        return value
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise click.BadParameter(f"not a hex byte string: {value!r}") from e


def render(value: object) -> str:
    """Render a view or element for terminal output."""
    match value:
        case TextView():
            return str(value)
        case memoryview():
            return value.tobytes().hex(" ")
        case _:
            return str(value)
