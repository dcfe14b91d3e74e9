"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    CodecSettings,
    LoggingSettings,
    RustifySettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CodecSettings",
    "LoggingSettings",
    "RustifySettings",
    "clear_settings_cache",
    "get_settings",
]
