"""Password validation service.

Checks a password against the policy of a strength level:
- Minimum length
- Lowercase letter requirement
- Uppercase letter requirement
- Digit requirement
- Special character requirement (MEDIUM and HIGH only)

Symbol presence is always tested against the extended symbol set, whatever
level is being validated.
"""

import re

from passgen.domain.entities.policy import EXTENDED_SYMBOLS
from passgen.domain.entities.strength import StrengthLevel
from passgen.domain.entities.validation_report import ValidationReport
from passgen.domain.services.policy_lookup import get_policy


class PasswordValidator:
    """Validates passwords against strength policies."""

    LOWERCASE_PATTERN = re.compile(r"[a-z]")
    UPPERCASE_PATTERN = re.compile(r"[A-Z]")
    DIGIT_PATTERN = re.compile(r"[0-9]")
    SYMBOL_PATTERN = re.compile(f"[{re.escape(EXTENDED_SYMBOLS)}]")

    def validate(self, password: str, strength: StrengthLevel | str) -> ValidationReport:
        """Validate a password against a strength policy.

        Args:
            password: The password to validate. Any string is accepted.
            strength: Strength level (member or name).

        Returns:
            ValidationReport with per-class flags and the overall verdict.

        Raises:
            UnknownStrengthError: If ``strength`` names no level.
        """
        policy = get_policy(strength)

        has_lowercase = bool(self.LOWERCASE_PATTERN.search(password))
        has_uppercase = bool(self.UPPERCASE_PATTERN.search(password))
        has_numbers = bool(self.DIGIT_PATTERN.search(password))
        has_symbols = bool(self.SYMBOL_PATTERN.search(password))
        meets_length = len(password) >= policy.min_length

        valid = (
            has_lowercase
            and has_uppercase
            and has_numbers
            and meets_length
            and (has_symbols or policy.strength is StrengthLevel.LOW)
        )

        return ValidationReport(
            valid=valid,
            has_lowercase=has_lowercase,
            has_uppercase=has_uppercase,
            has_numbers=has_numbers,
            has_symbols=has_symbols,
            meets_length=meets_length,
            strength=policy.strength,
            min_length=policy.min_length,
        )

    def is_valid(self, password: str, strength: StrengthLevel | str) -> bool:
        """Check if a password satisfies a strength policy."""
        return self.validate(password, strength).valid


# Default validator instance
default_password_validator = PasswordValidator()


def validate(password: str, strength: StrengthLevel | str) -> ValidationReport:
    """Validate a password using the default validator."""
    return default_password_validator.validate(password, strength)
