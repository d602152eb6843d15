"""
Configuration management for the instrument catalog.

Uses pydantic-settings for type-safe environment variable handling.
Settings only tune logging; they never change the catalog output.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Variables use the INSTRUMENT_CATALOG_ prefix, e.g.
    INSTRUMENT_CATALOG_LOG_LEVEL=DEBUG.
    """

    model_config = SettingsConfigDict(
        env_prefix="INSTRUMENT_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON-shaped log lines instead of human-readable ones",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    def get_redacted_config(self) -> dict[str, str | bool]:
        """Get configuration dict safe for logging."""
        return {
            "log_level": self.log_level,
            "log_json": self.log_json,
        }


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Call get_settings.cache_clear() to reload from the environment.
    """
    return Settings()
