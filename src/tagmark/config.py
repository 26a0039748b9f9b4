"""Configuration management for tagmark."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Link detection
    auto_link: bool = Field(
        default=False,
        alias="TAGMARK_AUTO_LINK",
    )
    fuzzy_links: bool = Field(
        default=False,
        alias="TAGMARK_FUZZY_LINKS",
    )
    fuzzy_email: bool = Field(
        default=True,
        alias="TAGMARK_FUZZY_EMAIL",
    )

    # Chat platform message ceiling, in characters
    message_char_limit: int = Field(
        default=4096,
        gt=0,
        alias="TAGMARK_MESSAGE_CHAR_LIMIT",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        alias="TAGMARK_LOG_LEVEL",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
