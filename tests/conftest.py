"""Pytest configuration for all tests."""

import os
from typing import Generator

import pytest
import structlog

from passgen.core.config import get_settings
from passgen.core.logging import clear_context
from passgen.domain.services.random_source import pseudo_random_source


class ScriptedRandomSource:
    """Random source that answers every draw with a fixed strategy.

    Records each requested bound in ``bounds`` so tests can check which
    ranges the generator drew from, and in which order.
    """

    def __init__(self, pick: str = "first") -> None:
        self.pick = pick
        self.bounds: list[int] = []

    def randbelow(self, n: int) -> int:
        self.bounds.append(n)
        return 0 if self.pick == "first" else n - 1


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from the caller's PASSGEN_* environment and cached settings."""
    for key in list(os.environ):
        if key.startswith("PASSGEN_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    clear_context()
    structlog.reset_defaults()


@pytest.fixture
def seeded_source():
    """Reproducible random source."""
    return pseudo_random_source(seed=1234)


@pytest.fixture
def first_source() -> ScriptedRandomSource:
    """Random source that always draws index 0."""
    return ScriptedRandomSource("first")


@pytest.fixture
def last_source() -> ScriptedRandomSource:
    """Random source that always draws the highest index."""
    return ScriptedRandomSource("last")
