"""Configuration management for msg-header-merge.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the MSG_MERGE_ prefix (e.g., MSG_MERGE_HYPERLINKS).
    """

    model_config = SettingsConfigDict(
        env_prefix="MSG_MERGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Rendering Configuration
    hyperlinks: bool = Field(
        default=False,
        description="Render mailto/attachment hyperlinks when the body is HTML",
    )
    strict_required_fields: bool = Field(
        default=False,
        description=(
            "Raise MissingRequiredFieldError for absent required fields "
            "(From, To, Subject, Organizer, Mandatory participants) instead of "
            "rendering an empty value"
        ),
    )
    labels_path: Path | None = Field(
        default=None,
        description="Optional JSON file with localized label overrides",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG logging regardless of log_level)",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
