"""Configuration utilities for password hashing."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwhash.models.params import ParameterSet, default_parallelism

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Hashing settings loaded from ``PWHASH_*`` environment variables."""

    # Argon2id cost parameters
    memory_cost: int = Field(65536, description="Memory usage in kibibytes")
    iterations: int = Field(1, description="Number of passes over memory")
    parallelism: Optional[int] = Field(None, description="Number of lanes; CPU count when unset")
    salt_length: int = Field(16, description="Salt length in bytes")
    digest_length: int = Field(32, description="Derived digest length in bytes")

    log_level: str = Field("INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the logging level name.

        Args:
            v: Level name

        Returns:
            str: Upper-cased level name

        Raises:
            ValueError: If the level name is unknown
        """
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="PWHASH_",
        extra="ignore"
    )

    def parameters(self) -> ParameterSet:
        """Build the ParameterSet described by these settings."""
        return ParameterSet(
            memory_cost=self.memory_cost,
            iterations=self.iterations,
            parallelism=self.parallelism if self.parallelism is not None else default_parallelism(),
            salt_length=self.salt_length,
            digest_length=self.digest_length,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Create and cache settings instance.

    Returns:
        Settings: Hashing settings
    """
    return Settings()
