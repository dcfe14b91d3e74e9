"""Foundation: errors, type aliases and configuration."""

from .config import CodecSettings, LoggingSettings, RustifySettings, clear_settings_cache, get_settings
from .errors import (
    ContractError,
    ErrorCode,
    ErrUnwrapError,
    JsonDict,
    JsonPrimitive,
    JsonStructured,
    JsonValue,
    NothingUnwrapError,
    OkUnwrapError,
    RustifyError,
    UnwrapError,
)

__all__ = [
    # Errors
    "ErrorCode", "RustifyError", "UnwrapError", "NothingUnwrapError", "ErrUnwrapError", "OkUnwrapError",
    "ContractError",
    # Types
    "JsonPrimitive", "JsonValue", "JsonDict", "JsonStructured",
    # Config
    "RustifySettings", "LoggingSettings", "CodecSettings", "get_settings", "clear_settings_cache",
]
