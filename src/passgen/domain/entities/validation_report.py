"""Validation report entity.

Stores the outcome of checking a password against a strength policy.
"""

from dataclasses import dataclass
from typing import Any

from passgen.domain.entities.strength import StrengthLevel


@dataclass(frozen=True)
class PolicyViolation:
    """Represents a single failed policy requirement.

    Attributes:
        field: The field name (always 'password').
        message: Human-readable error message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: str


@dataclass(frozen=True)
class ValidationReport:
    """Per-class pass/fail report for a password.

    Attributes:
        valid: True when every requirement of the policy is met.
        has_lowercase: Password contains a lowercase letter.
        has_uppercase: Password contains an uppercase letter.
        has_numbers: Password contains a digit.
        has_symbols: Password contains a symbol from the extended set.
        meets_length: Password is at least the policy minimum length.
        strength: The strength level the password was checked against.
        min_length: The minimum length that level requires.
    """

    valid: bool
    has_lowercase: bool
    has_uppercase: bool
    has_numbers: bool
    has_symbols: bool
    meets_length: bool
    strength: StrengthLevel
    min_length: int

    @property
    def violations(self) -> tuple[PolicyViolation, ...]:
        """The requirements this password fails, empty when valid."""
        violations: list[PolicyViolation] = []

        if not self.meets_length:
            violations.append(
                PolicyViolation(
                    field="password",
                    message=f"Password must be at least {self.min_length} characters",
                    code="password_too_short",
                )
            )

        if not self.has_uppercase:
            violations.append(
                PolicyViolation(
                    field="password",
                    message="Password must contain at least one uppercase letter",
                    code="password_no_uppercase",
                )
            )

        if not self.has_lowercase:
            violations.append(
                PolicyViolation(
                    field="password",
                    message="Password must contain at least one lowercase letter",
                    code="password_no_lowercase",
                )
            )

        if not self.has_numbers:
            violations.append(
                PolicyViolation(
                    field="password",
                    message="Password must contain at least one digit",
                    code="password_no_digit",
                )
            )

        if not self.has_symbols and self.strength is not StrengthLevel.LOW:
            violations.append(
                PolicyViolation(
                    field="password",
                    message="Password must contain at least one special character",
                    code="password_no_special",
                )
            )

        return tuple(violations)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the report, with the strength as its plain value."""
        return {
            "valid": self.valid,
            "has_lowercase": self.has_lowercase,
            "has_uppercase": self.has_uppercase,
            "has_numbers": self.has_numbers,
            "has_symbols": self.has_symbols,
            "meets_length": self.meets_length,
            "strength": self.strength.value,
            "min_length": self.min_length,
        }
