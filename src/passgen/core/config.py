"""Configuration management for PassGen.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passgen.domain.entities.strength import StrengthLevel


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSGEN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "PassGen"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "console"] = "console"

    # Generation Defaults
    default_strength: StrengthLevel = StrengthLevel.MEDIUM
    default_length: int = Field(
        default=12,
        ge=1,
        description="Length used by the CLI when --length is not given",
    )

    # Randomness Settings
    random_source: Literal["system", "pseudo"] = Field(
        default="system",
        description="'system' draws from the OS CSPRNG, 'pseudo' from a seedable PRNG",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the 'pseudo' random source (reproducible output)",
    )

    @field_validator("default_strength", mode="before")
    @classmethod
    def parse_default_strength(cls, v: str | StrengthLevel) -> StrengthLevel:
        """Accept strength names in any case."""
        return StrengthLevel.parse(v)

    @model_validator(mode="after")
    def validate_random_seed(self) -> "Settings":
        """A seed only makes sense for the seedable source."""
        if self.random_seed is not None and self.random_source == "system":
            raise ValueError(
                "random_seed cannot be used with the 'system' random source. "
                "Set random_source to 'pseudo' or remove the seed."
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
