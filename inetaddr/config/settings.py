"""
inetaddr Settings
Pydantic-based configuration with support for env vars and config files.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("console", "json")


class AppSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    name: str = Field(default="inetaddr", alias="APP_NAME")
    env: str = Field(default="development", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        if isinstance(v, str):
            v = v.strip().upper()
        if logging.getLevelName(v) == f"Level {v}":
            raise ValueError(f"Unknown log level {v!r}")
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def parse_log_format(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"Log format must be one of {', '.join(LOG_FORMATS)}, got {v!r}")
        return v


class OutputSettings(BaseSettings):
    """Rendering settings for the command line."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ipv6_expanded: bool = Field(default=False, alias="IPV6_EXPANDED")
    json_indent: int = Field(default=2, ge=0, alias="JSON_INDENT")


class Settings(BaseSettings):
    """
    Main settings class that aggregates all config sections.

    Usage:
        from inetaddr.config import get_settings

        settings = get_settings()
        print(settings.app.log_level)
        print(settings.output.ipv6_expanded)
    """

    model_config = SettingsConfigDict(extra="ignore")

    # Sub-settings, each reads the environment and `.env.local` itself
    app: AppSettings = Field(default_factory=AppSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    def __init__(self, **data):
        super().__init__(**data)
        self.app = AppSettings()
        self.output = OutputSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: The application settings
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Reload settings (clears cache).

    Returns:
        Settings: Fresh settings instance
    """
    get_settings.cache_clear()
    return get_settings()
