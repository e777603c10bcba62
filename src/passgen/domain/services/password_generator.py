"""Password generation service.

Builds passwords that satisfy a strength policy by construction:
- one character drawn from every mandatory character class
- the remaining positions drawn from the union alphabet
- a Fisher-Yates shuffle so the guaranteed characters are not at the front
"""

from passgen.core.logging import get_logger
from passgen.domain.entities.policy import GenerationRequest
from passgen.domain.entities.strength import StrengthLevel
from passgen.domain.exceptions import InvalidLengthError
from passgen.domain.services.policy_lookup import get_policy
from passgen.domain.services.random_source import RandomSource, system_random_source

logger = get_logger(__name__)


class PasswordGenerator:
    """Generates random passwords for a strength level.

    The generator holds no state besides its random source, so a single
    instance can be shared between callers.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        """Initialize the generator.

        Args:
            random_source: Source of uniform draws. Defaults to the OS CSPRNG.
        """
        self.random_source = random_source if random_source is not None else system_random_source()

    def generate(self, length: int, strength: StrengthLevel | str) -> str:
        """Generate a password of exactly ``length`` characters.

        Args:
            length: Requested password length.
            strength: Strength level (member or name).

        Returns:
            A password containing at least one character of every
            mandatory class of the strength's policy.

        Raises:
            TypeError: If ``length`` is not an integer.
            InvalidLengthError: If ``length`` is below the policy minimum.
            UnknownStrengthError: If ``strength`` names no level.
        """
        policy = get_policy(strength)

        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError(f"Password length must be an integer, got {type(length).__name__}")

        if length < policy.min_length:
            raise InvalidLengthError(length, policy.strength, policy.min_length)

        chars = [self._choice(char_class.characters) for char_class in policy.classes]

        alphabet = policy.alphabet
        chars.extend(self._choice(alphabet) for _ in range(length - len(chars)))

        self._shuffle(chars)

        logger.debug(
            "Generated password",
            strength=policy.strength.value,
            length=length,
        )
        return "".join(chars)

    def generate_request(self, request: GenerationRequest) -> str:
        """Generate a password for a GenerationRequest."""
        return self.generate(request.length, request.strength)

    def _choice(self, characters: str) -> str:
        return characters[self.random_source.randbelow(len(characters))]

    def _shuffle(self, chars: list[str]) -> None:
        """Shuffle in place (Fisher-Yates)."""
        for i in range(len(chars) - 1, 0, -1):
            j = self.random_source.randbelow(i + 1)
            chars[i], chars[j] = chars[j], chars[i]


# Default generator instance
default_password_generator = PasswordGenerator()


def generate(length: int, strength: StrengthLevel | str) -> str:
    """Generate a password using the default (system random) generator."""
    return default_password_generator.generate(length, strength)
