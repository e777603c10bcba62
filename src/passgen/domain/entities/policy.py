"""Character class and policy entities.

A policy pairs the character classes a password must draw from with the
minimum password length for a strength level. The table of policies is
built once at import time and exposed read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from passgen.domain.entities.strength import StrengthLevel

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
BASIC_SYMBOLS = "!@#$%^&*"
EXTENDED_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


@dataclass(frozen=True)
class CharacterClass:
    """A named, non-empty sequence of distinct characters.

    Attributes:
        name: Class name ("lowercase", "uppercase", "numbers", "symbols").
        characters: The characters in the class, in draw order.
    """

    name: str
    characters: str

    def __post_init__(self) -> None:
        if not self.characters:
            raise ValueError(f"Character class {self.name!r} must not be empty")
        if len(set(self.characters)) != len(self.characters):
            raise ValueError(f"Character class {self.name!r} contains duplicate characters")


@dataclass(frozen=True)
class Policy:
    """Mandatory character classes and minimum length for a strength level.

    Attributes:
        strength: The strength level this policy belongs to.
        classes: Mandatory character classes, in generation order.
        min_length: Minimum password length.
    """

    strength: StrengthLevel
    classes: tuple[CharacterClass, ...]
    min_length: int

    def __post_init__(self) -> None:
        # Every mandatory class needs at least one slot.
        if self.min_length < len(self.classes):
            raise ValueError(
                f"Policy for {self.strength.value} needs min_length >= {len(self.classes)}, "
                f"got {self.min_length}"
            )

    @property
    def alphabet(self) -> str:
        """Union alphabet: all classes concatenated in order."""
        return "".join(char_class.characters for char_class in self.classes)

    @property
    def class_names(self) -> tuple[str, ...]:
        return tuple(char_class.name for char_class in self.classes)

    @property
    def requires_symbols(self) -> bool:
        return "symbols" in self.class_names


@dataclass(frozen=True)
class GenerationRequest:
    """A request for a password of a given length and strength."""

    length: int
    strength: StrengthLevel


_LOWERCASE_CLASS = CharacterClass("lowercase", LOWERCASE)
_UPPERCASE_CLASS = CharacterClass("uppercase", UPPERCASE)
_NUMBERS_CLASS = CharacterClass("numbers", NUMBERS)

POLICY_TABLE: Mapping[StrengthLevel, Policy] = MappingProxyType(
    {
        StrengthLevel.LOW: Policy(
            strength=StrengthLevel.LOW,
            classes=(_LOWERCASE_CLASS, _UPPERCASE_CLASS, _NUMBERS_CLASS),
            min_length=6,
        ),
        StrengthLevel.MEDIUM: Policy(
            strength=StrengthLevel.MEDIUM,
            classes=(
                _LOWERCASE_CLASS,
                _UPPERCASE_CLASS,
                _NUMBERS_CLASS,
                CharacterClass("symbols", BASIC_SYMBOLS),
            ),
            min_length=8,
        ),
        StrengthLevel.HIGH: Policy(
            strength=StrengthLevel.HIGH,
            classes=(
                _LOWERCASE_CLASS,
                _UPPERCASE_CLASS,
                _NUMBERS_CLASS,
                CharacterClass("symbols", EXTENDED_SYMBOLS),
            ),
            min_length=12,
        ),
    }
)
