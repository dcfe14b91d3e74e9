"""rustify - explicit Option and Result containers for Python.

Replace `None`-as-absence and ad-hoc exceptions with values the caller has to
look at. Failures travel as data (Nothing / Err); exceptions are raised only
when the caller asks for an unconditional unwrap.

Quick Start:
    >>> from rustify import Some, Nothing, Ok, Err
    >>>
    >>> Some(3).map(lambda x: x + 1).unwrap_or(0)
    4
    >>> Nothing().map(lambda x: x + 1).unwrap_or(0)
    0
    >>> Ok(10).and_then(lambda x: Err("too big") if x > 5 else Ok(x))
    Err('too big')

Lifting nullable values:
    >>> from rustify import from_nullable
    >>> from_nullable({"a": 1}.get("b")).unwrap_or("missing")
    'missing'

Shorthands:
    >>> from rustify import success, failure, match_result
    >>> match_result(failure("boom"), lambda v: v, lambda e: f"error: {e}")
    'error: boom'

JSON decoding:
    >>> from rustify import decode_structured
    >>> decode_structured('{"a": 1}').unwrap()
    {'a': 1}
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import (
    ContractError,
    ErrorCode,
    ErrUnwrapError,
    NothingUnwrapError,
    OkUnwrapError,
    RustifyError,
    UnwrapError,
)

# Config
from .foundation.config import RustifySettings, clear_settings_cache, get_settings

# Containers
from .monads import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    absent,
    attempt,
    collect_results,
    failure,
    from_nullable,
    if_present_do,
    if_success_do,
    match_option,
    match_result,
    option_or_value,
    present,
    result_or_value,
    sequence,
    success,
    traverse,
)

# Decoding
from .io import decode, decode_model, decode_structured

# Logging
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Containers
    "Option", "Some", "Nothing", "from_nullable",
    "Result", "Ok", "Err", "attempt",
    "sequence", "traverse", "collect_results",
    # Shorthands
    "present", "absent", "success", "failure",
    "if_present_do", "if_success_do", "match_option", "match_result",
    "option_or_value", "result_or_value",
    # Decoding
    "decode", "decode_structured", "decode_model",
    # Errors
    "ErrorCode", "RustifyError", "UnwrapError", "NothingUnwrapError", "ErrUnwrapError", "OkUnwrapError",
    "ContractError",
    # Config & logging
    "RustifySettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
