"""Unit tests for random sources."""

from types import SimpleNamespace

import pytest

from passgen.domain.services.random_source import (
    RandomSource,
    pseudo_random_source,
    random_source_from_settings,
    system_random_source,
)


def test_sources_satisfy_protocol():
    assert isinstance(system_random_source(), RandomSource)
    assert isinstance(pseudo_random_source(1), RandomSource)


@pytest.mark.parametrize("factory", [system_random_source, lambda: pseudo_random_source(7)])
def test_draws_stay_in_range(factory):
    source = factory()
    draws = [source.randbelow(5) for _ in range(500)]
    assert min(draws) >= 0
    assert max(draws) <= 4
    assert set(draws) == {0, 1, 2, 3, 4}


def test_randbelow_one_is_zero():
    assert pseudo_random_source().randbelow(1) == 0


def test_randbelow_rejects_non_positive():
    with pytest.raises(ValueError):
        system_random_source().randbelow(0)


def test_seeded_sources_repeat():
    first = pseudo_random_source(42)
    second = pseudo_random_source(42)
    assert [first.randbelow(100) for _ in range(20)] == [second.randbelow(100) for _ in range(20)]


def test_from_settings_pseudo_is_seeded():
    settings = SimpleNamespace(random_source="pseudo", random_seed=3)
    first = random_source_from_settings(settings)
    second = random_source_from_settings(settings)
    assert [first.randbelow(1000) for _ in range(10)] == [second.randbelow(1000) for _ in range(10)]


def test_from_settings_system():
    settings = SimpleNamespace(random_source="system", random_seed=None)
    assert isinstance(random_source_from_settings(settings), RandomSource)
