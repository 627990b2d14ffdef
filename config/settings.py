"""
Process configuration using Pydantic Settings.

Loads schema defaults from environment variables with sensible defaults.
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Schema Defaults
    default_namespace: str | None = None
    max_identifier_length: int = Field(default=63, ge=1)

    # Rendering
    default_dialect: str = "postgres"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
