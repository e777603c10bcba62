"""Domain entities for PassGen.

Entities are immutable dataclasses and enums describing strength levels,
character-class policies and validation results. They have no dependencies
on infrastructure or external frameworks.
"""

from passgen.domain.entities.policy import (
    BASIC_SYMBOLS,
    EXTENDED_SYMBOLS,
    LOWERCASE,
    NUMBERS,
    POLICY_TABLE,
    UPPERCASE,
    CharacterClass,
    GenerationRequest,
    Policy,
)
from passgen.domain.entities.strength import StrengthLevel
from passgen.domain.entities.validation_report import PolicyViolation, ValidationReport

__all__ = [
    "BASIC_SYMBOLS",
    "EXTENDED_SYMBOLS",
    "LOWERCASE",
    "NUMBERS",
    "POLICY_TABLE",
    "UPPERCASE",
    "CharacterClass",
    "GenerationRequest",
    "Policy",
    "PolicyViolation",
    "StrengthLevel",
    "ValidationReport",
]
