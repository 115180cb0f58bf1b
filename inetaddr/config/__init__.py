"""
inetaddr Configuration Module
Centralized configuration management using pydantic-settings.
"""

from inetaddr.config.settings import (
    Settings,
    AppSettings,
    OutputSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "AppSettings",
    "OutputSettings",
    "get_settings",
    "reload_settings",
]
