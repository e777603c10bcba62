"""Strength level entity.

Strength levels are a closed, totally ordered enumeration. Anything coming
from outside the process (CLI flags, environment variables) goes through
``StrengthLevel.parse`` so that policy lookup only ever sees valid members.
"""

from enum import Enum

from passgen.domain.exceptions import UnknownStrengthError


class StrengthLevel(str, Enum):
    """Password strength levels, ordered from least to most strict."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Position in the strictness order (LOW is 0)."""
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | StrengthLevel") -> "StrengthLevel":
        """Parse external input into a strength level.

        Args:
            value: A StrengthLevel member or its name ("low", " HIGH ", ...).

        Returns:
            The matching StrengthLevel.

        Raises:
            UnknownStrengthError: If the value does not name a strength level.

        Examples:
            >>> StrengthLevel.parse("High")
            <StrengthLevel.HIGH: 'high'>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownStrengthError(value)


_RANKS = {
    StrengthLevel.LOW: 0,
    StrengthLevel.MEDIUM: 1,
    StrengthLevel.HIGH: 2,
}
