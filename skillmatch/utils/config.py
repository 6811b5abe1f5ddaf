"""
Configuration management for SkillMatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class DatabaseSettings(BaseSettings):
    """MongoDB database configuration."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "skillmatch"
    username: str | None = None
    password: str | None = None


class DirectorySettings(BaseSettings):
    """User directory backend configuration."""

    model_config = SettingsConfigDict(env_prefix="DIRECTORY_")

    backend: Literal["memory", "mongodb"] = "memory"
    users_collection: str = "users"

    # Only honoured by the in-memory backend
    seed_demo_data: bool = True


class MatchingSettings(BaseSettings):
    """Compatibility scoring configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    # Scores are capped below 100 so no match reads as "perfect"
    max_score: int = Field(99, ge=0, le=99)
    interest_bonus: int = Field(20, ge=0)
    default_top_n: int = Field(10, ge=1)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "skillmatch.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        return v.upper() if isinstance(v, str) else v


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "SkillMatch"
    version: str = "0.1.0"
    description: str = "Peer skill-exchange matchmaking for student networks"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    directory: DirectorySettings = Field(default_factory=DirectorySettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
