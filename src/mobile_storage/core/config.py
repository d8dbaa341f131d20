"""
Configuration management for Mobile Storage.

Uses Pydantic Settings for environment variable validation and type safety.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_PATH = str(Path.home() / ".mobile_storage" / "mobiles.db")


class StorageConfig(BaseSettings):
    """Embedded database configuration."""

    model_config = SettingsConfigDict(env_prefix="MOBILE_STORAGE_")

    db_path: str = Field(
        default=DEFAULT_DB_PATH,
        description="Path to the SQLite database file"
    )
    retry_attempts: int = Field(
        default=2,
        ge=0,
        description="Extra attempts for writes that hit a locked database"
    )
    retry_delay: float = Field(
        default=0.1,
        ge=0.0,
        description="Seconds to wait between write attempts"
    )
    busy_timeout: float = Field(
        default=5.0,
        ge=0.0,
        description="Seconds SQLite waits on a locked database before failing"
    )


class AppConfig(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the global configuration instance.

    Lazily loads configuration on first access.

    Returns:
        AppConfig: The global configuration instance
    """
    global _config
    if _config is None:
        _config = AppConfig(storage=StorageConfig())
    return _config


def reload_config() -> AppConfig:
    """
    Reload configuration from environment variables.

    Returns:
        AppConfig: The reloaded configuration instance
    """
    global _config
    _config = None
    return get_config()
