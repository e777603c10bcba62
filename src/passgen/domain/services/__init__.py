"""Domain services for PassGen.

Services contain the generation and validation logic. They are stateless
apart from the injected random source.
"""

from passgen.domain.services.password_generator import (
    PasswordGenerator,
    default_password_generator,
    generate,
)
from passgen.domain.services.password_validator import (
    PasswordValidator,
    default_password_validator,
    validate,
)
from passgen.domain.services.policy_lookup import (
    character_classes,
    get_policy,
    minimum_length,
)
from passgen.domain.services.random_source import (
    RandomSource,
    pseudo_random_source,
    random_source_from_settings,
    system_random_source,
)

__all__ = [
    "PasswordGenerator",
    "PasswordValidator",
    "RandomSource",
    "character_classes",
    "default_password_generator",
    "default_password_validator",
    "generate",
    "get_policy",
    "minimum_length",
    "pseudo_random_source",
    "random_source_from_settings",
    "system_random_source",
    "validate",
]
