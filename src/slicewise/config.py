"""Configuration utilities for SLICEWISE.

This module centralizes small helpers and constants related to configuration
read from the environment.
"""

import os
from enum import Enum

ENV_PREFIX = "SLICEWISE"  # pragma: no mutate
INPUT_KIND_ENV = f"{ENV_PREFIX}_INPUT_KIND"  # pragma: no mutate


class InputKind(Enum):
    """How command-line operands are interpreted."""

    TEXT = "text"
    BYTES = "bytes"


class InvalidInputKindError(Exception):
    """Raised when SLICEWISE_INPUT_KIND holds an unknown value."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(kind.value for kind in InputKind)
        super().__init__(
            f"{INPUT_KIND_ENV}={value!r} is not one of: {choices}"
        )
        self.value = value


def get_input_kind() -> InputKind:
    """Get the default operand kind from the environment.

    Returns:
        The kind named by `SLICEWISE_INPUT_KIND`, or `InputKind.TEXT` when it
        is unset or empty.

    Raises:
        InvalidInputKindError: If the variable holds an unknown kind.
    """
    if not (value := os.environ.get(INPUT_KIND_ENV)):
        return InputKind.TEXT
    try:
        return InputKind(value.strip().lower())
    except ValueError as e:
        raise InvalidInputKindError(value) from e
