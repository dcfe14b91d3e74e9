"""Error taxonomy for rustify.

- ErrorCode: Codes tagging raised exceptions and decode failures
- RustifyError: Root of every exception the library raises
- UnwrapError family: Unconditional unwrap on the wrong variant
- ContractError: Chaining callback returned a non-container
"""

from .errors import (
    ContractError,
    ErrorCode,
    ErrUnwrapError,
    NothingUnwrapError,
    OkUnwrapError,
    RustifyError,
    UnwrapError,
)
from .types import JsonDict, JsonPrimitive, JsonStructured, JsonValue

__all__ = [
    # Codes
    "ErrorCode",
    # Exceptions
    "RustifyError", "UnwrapError", "NothingUnwrapError", "ErrUnwrapError", "OkUnwrapError", "ContractError",
    # JSON aliases
    "JsonPrimitive", "JsonValue", "JsonDict", "JsonStructured",
]
