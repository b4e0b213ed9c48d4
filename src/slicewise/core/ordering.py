"""Three-way comparison outcome."""

from enum import Enum


class Ordering(Enum):
    """Result of comparing two views."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        """Return the ordering seen from the other operand."""
        return Ordering(-self.value)

    @classmethod
    def of(cls, lhs: object, rhs: object) -> "Ordering":
        """Order two mutually comparable scalars."""
        if lhs < rhs:  # type: ignore[operator]
            return cls.LESS
        if lhs > rhs:  # type: ignore[operator]
            return cls.GREATER
        return cls.EQUAL
