"""Exceptions raised by the password policy engine."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from passgen.domain.entities.strength import StrengthLevel


class PassGenError(Exception):
    """Base class for all PassGen errors."""

    code = "passgen_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidLengthError(PassGenError, ValueError):
    """Raised when a requested password length is below the policy minimum.

    Attributes:
        length: The requested (offending) length.
        strength: The strength level the password was requested for.
        min_length: The minimum length that level requires.
    """

    code = "password_invalid_length"

    def __init__(self, length: int, strength: "StrengthLevel", min_length: int) -> None:
        self.length = length
        self.strength = strength
        self.min_length = min_length
        super().__init__(
            f"Password length must be at least {min_length} characters "
            f"for {strength.value} strength"
        )


class UnknownStrengthError(PassGenError, ValueError):
    """Raised when external input does not name a known strength level."""

    code = "strength_unknown"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unknown strength level {value!r}. Expected one of: low, medium, high"
        )
