"""CLI helpers for SLICEWISE.

Utilities used by the command-line interface: operand and index parsing,
rendering of views for terminal output, logger-level option parsing, and an
error emitter that writes to stderr with emoji→ASCII fallbacks.
"""

from .messages import error
from .operands import IndexExpr, load_operand, render

__all__ = ["error", "IndexExpr", "load_operand", "render"]
