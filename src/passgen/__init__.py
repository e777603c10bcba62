"""PassGen - policy-driven password generation and validation.

Generates random passwords that satisfy a low/medium/high strength policy
and checks arbitrary strings against the same policies.
"""

__version__ = "0.1.0"

from passgen.domain.entities import StrengthLevel, ValidationReport
from passgen.domain.exceptions import InvalidLengthError, PassGenError, UnknownStrengthError
from passgen.domain.services import (
    character_classes,
    generate,
    get_policy,
    minimum_length,
    validate,
)

__all__ = [
    "InvalidLengthError",
    "PassGenError",
    "StrengthLevel",
    "UnknownStrengthError",
    "ValidationReport",
    "__version__",
    "character_classes",
    "generate",
    "get_policy",
    "minimum_length",
    "validate",
]
