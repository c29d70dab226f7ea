"""Configuration management using Pydantic Settings.

This module provides centralized configuration for the box score normalizer,
supporting environment variables and .env file loading.

Example:
    >>> from basketball_boxscore.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.default_feed_kind)
    'generic'
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    Environment variables take precedence over .env file values.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Directory for log files.
        log_serialize: Whether file logs are written as JSON lines.
        default_feed_kind: Feed kind assumed when the caller supplies none.
        strict_detection: Reject sources that fall back to the generic feed.
        json_indent: Indentation used when writing canonical JSON.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )
    log_dir: str = Field(
        default="logs",
        alias="LOG_DIR",
        description="Directory for log files",
    )
    log_serialize: bool = Field(
        default=True,
        alias="LOG_SERIALIZE",
        description="Write file logs as JSON lines",
    )

    # Feed handling
    default_feed_kind: Literal["nba", "euroleague", "generic"] = Field(
        default="generic",
        alias="BOXSCORE_FEED_KIND",
        description="Feed kind used when none is given explicitly",
    )
    strict_detection: bool = Field(
        default=False,
        alias="BOXSCORE_STRICT_DETECTION",
        description="Fail instead of falling back to the generic feed",
    )

    # Output
    json_indent: int = Field(
        default=2,
        alias="BOXSCORE_JSON_INDENT",
        ge=0,
        le=8,
        description="Indentation for canonical JSON output",
    )

    @field_validator("log_dir")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure path strings are valid."""
        if not v or v.isspace():
            raise ValueError("Path cannot be empty or whitespace")
        return v

    @field_validator("default_feed_kind", mode="before")
    @classmethod
    def normalize_feed_kind(cls, v: object) -> object:
        """Accept feed kinds in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def log_dir_obj(self) -> Path:
        """Return log directory as Path object."""
        return Path(self.log_dir)

    def ensure_directories(self) -> None:
        """Create required directories if they don't exist."""
        self.log_dir_obj.mkdir(parents=True, exist_ok=True)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        Settings instance loaded from environment.

    Example:
        >>> settings = get_settings()
        >>> print(settings.strict_detection)
        False
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
