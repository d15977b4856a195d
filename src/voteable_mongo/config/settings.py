"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import NonEmptyStr, ServerSelectionTimeoutMs
from ..domain.voting.entities import VoteableConfig


class MongoSettings(BaseModel):
    """MongoDB connection configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(
        default="mongodb://localhost:27017",
        validation_alias=AliasChoices("url", "mongo_url", "mongodb_uri"),
    )
    database: NonEmptyStr = Field(
        default="voteable",
        validation_alias=AliasChoices("database", "db", "db_name"),
    )
    server_selection_timeout_ms: ServerSelectionTimeoutMs = Field(
        default=5000,
        validation_alias=AliasChoices("server_selection_timeout_ms", "timeout_ms"),
    )
    app_name: str = "voteable-mongo"

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate Mongo connection string scheme."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(ErrorMessages.INVALID_MONGO_URL)
        return v


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - LOG_LEVEL (top-level)
    - MONGO__URL, MONGO__DATABASE, etc. (nested with delimiter)
    - VOTEABLE as JSON, e.g. '{"Comment": {"up": 1, "down": -1}}'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    mongo: MongoSettings = Field(default_factory=MongoSettings)
    voteable: dict[str, VoteableConfig] = Field(default_factory=dict)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
