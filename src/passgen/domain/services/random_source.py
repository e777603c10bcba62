"""Randomness sources for password generation.

The generator only needs uniform integer draws, so any object with a
``randbelow(n)`` method will do. The OS CSPRNG is the default; a seeded
PRNG is available for reproducible output.
"""

import random
import secrets
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Source of independent, uniformly distributed integer draws."""

    def randbelow(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``. ``n`` must be positive."""
        ...


class _RandomAdapter:
    """Adapts a ``random.Random`` instance to the RandomSource protocol."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() requires a positive bound, got {n}")
        return self._rng.randrange(n)


def system_random_source() -> RandomSource:
    """Random source backed by the operating system CSPRNG."""
    return _RandomAdapter(secrets.SystemRandom())


def pseudo_random_source(seed: int | None = None) -> RandomSource:
    """Random source backed by a (optionally seeded) Mersenne Twister.

    Args:
        seed: Seed for reproducible sequences. None seeds from the OS.
    """
    return _RandomAdapter(random.Random(seed))


def random_source_from_settings(settings: Any) -> RandomSource:
    """Build the random source selected by ``settings.random_source``."""
    if settings.random_source == "pseudo":
        return pseudo_random_source(settings.random_seed)
    return system_random_source()
