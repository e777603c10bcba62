
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from passgen.core.config import Settings, get_settings
from passgen.domain.entities import StrengthLevel


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    settings = Settings()

    assert settings.app_name == "PassGen"
    assert settings.environment == "development"
    assert settings.log_level == "WARNING"
    assert settings.default_strength is StrengthLevel.MEDIUM
    assert settings.default_length == 12
    assert settings.random_source == "system"
    assert settings.random_seed is None
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_testing is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "PASSGEN_ENVIRONMENT": "production",
        "PASSGEN_DEFAULT_STRENGTH": "High",
        "PASSGEN_DEFAULT_LENGTH": "20",
        "PASSGEN_RANDOM_SOURCE": "pseudo",
        "PASSGEN_RANDOM_SEED": "7",
    }):
        settings = Settings()

        assert settings.is_production is True
        assert settings.default_strength is StrengthLevel.HIGH
        assert settings.default_length == 20
        assert settings.random_source == "pseudo"
        assert settings.random_seed == 7


def test_unknown_default_strength_rejected():
    with pytest.raises(ValidationError):
        Settings(default_strength="extreme")


def test_default_length_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(default_length=0)


def test_seed_requires_pseudo_source():
    """A seed cannot be combined with the system random source."""
    with pytest.raises(ValidationError, match="random_seed"):
        Settings(random_source="system", random_seed=1)

    settings = Settings(random_source="pseudo", random_seed=1)
    assert settings.random_seed == 1


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
