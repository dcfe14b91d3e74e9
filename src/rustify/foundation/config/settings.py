"""Environment-based configuration using pydantic-settings.

The containers themselves take no configuration. Settings cover the parts
around them: log output and the limits applied by the JSON decoding helper.

Example:
    >>> from rustify.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.codec.max_size is None
    True

    # Or with environment variables:
    # RUSTIFY_LOG_LEVEL=DEBUG
    # RUSTIFY_CODEC_MAX_SIZE=1MiB
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import ByteSize, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RUSTIFY_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names from the environment."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class CodecSettings(BaseSettings):
    """Limits applied by the JSON decoding helper."""

    model_config = SettingsConfigDict(
        env_prefix="RUSTIFY_CODEC_",
        extra="ignore",
    )

    max_size: ByteSize | None = Field(
        default=None,
        description="Reject JSON bodies larger than this many bytes (unset = unlimited)",
    )

    @computed_field
    @property
    def limited(self) -> bool:
        """Whether a size limit is in force."""
        return self.max_size is not None


class RustifySettings(BaseSettings):
    """Root settings for rustify.

    Loads configuration from environment variables with RUSTIFY_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        RUSTIFY_DEBUG=true
        RUSTIFY_LOG_FORMAT=json
        RUSTIFY_CODEC_MAX_SIZE=10MB
    """

    model_config = SettingsConfigDict(
        env_prefix="RUSTIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG log level")

    # Nested settings (loaded with RUSTIFY_LOG_, RUSTIFY_CODEC_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)

    @computed_field
    @property
    def log_level(self) -> str:
        """Effective log level, DEBUG when debug mode is on."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> RustifySettings:
    """Get the global settings instance (cached).

    Example:
        >>> get_settings().debug
        False
    """
    return RustifySettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
