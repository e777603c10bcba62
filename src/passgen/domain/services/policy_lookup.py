"""Policy lookup and accessor functions.

All functions accept either a StrengthLevel or its string name; strings are
parsed at this boundary and rejected with UnknownStrengthError.
"""

from passgen.domain.entities.policy import POLICY_TABLE, Policy
from passgen.domain.entities.strength import StrengthLevel


def get_policy(strength: StrengthLevel | str) -> Policy:
    """Return the policy for a strength level.

    Raises:
        UnknownStrengthError: If ``strength`` is a string that names no level.
    """
    return POLICY_TABLE[StrengthLevel.parse(strength)]


def minimum_length(strength: StrengthLevel | str) -> int:
    """Return the minimum password length for a strength level.

    Examples:
        >>> minimum_length("medium")
        8
    """
    return get_policy(strength).min_length


def character_classes(strength: StrengthLevel | str) -> dict[str, str]:
    """Return the character classes active for a strength level.

    Only active classes are present: LOW has no ``"symbols"`` key.
    The result is a new dict on every call.

    Examples:
        >>> sorted(character_classes("low"))
        ['lowercase', 'numbers', 'uppercase']
    """
    return {
        char_class.name: char_class.characters
        for char_class in get_policy(strength).classes
    }
