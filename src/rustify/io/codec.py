"""JSON decoding into Result.

Wraps orjson so request bodies and config blobs come back as data instead of
raising: every failure is an Err carrying a human-readable message.

Usage:
    >>> from rustify.io import decode, decode_structured
    >>> decode('{"a": 1}')
    Ok({'a': 1})
    >>> decode("")
    Err('Empty JSON body')
    >>> decode_structured("123")
    Err('Expected JSON object or array')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import orjson
from pydantic import BaseModel, ValidationError

from rustify.foundation.config import get_settings
from rustify.foundation.errors import ErrorCode, JsonStructured, JsonValue
from rustify.monads import Err, Ok, Result
from rustify.observability import get_logger

if TYPE_CHECKING:
    from pydantic import ByteSize

M = TypeVar("M", bound=BaseModel)

EMPTY_BODY = "Empty JSON body"
NOT_STRUCTURED = "Expected JSON object or array"

_log = get_logger("rustify.io.codec")


def _reject(code: ErrorCode, message: str, **kw: JsonValue) -> Result[JsonValue, str]:
    _log.debug("json decode failed", code=code.value, error=message, **kw)
    return Err(message)


def _byte_size(raw: str | bytes) -> int:
    # surrogatepass: malformed text must reach the parser, not raise while measuring
    return len(raw) if isinstance(raw, bytes) else len(raw.encode("utf-8", "surrogatepass"))


def decode(raw: str | bytes, *, max_size: ByteSize | int | None = None) -> Result[JsonValue, str]:
    """Decode a JSON document.

    Empty input is rejected before the parser runs, so "no body" and
    "malformed body" stay distinguishable. max_size defaults to
    RUSTIFY_CODEC_MAX_SIZE.

    Returns:
        Ok(parsed value) or Err(message). Never raises for bad input.
    """
    if not raw:
        return _reject(ErrorCode.EMPTY_INPUT, EMPTY_BODY)

    limit = max_size if max_size is not None else get_settings().codec.max_size
    if limit is not None and (size := _byte_size(raw)) > limit:
        return _reject(ErrorCode.TOO_LARGE, f"JSON body exceeds {int(limit)} bytes", size=size)

    try:
        return Ok(orjson.loads(raw))
    except orjson.JSONDecodeError as e:
        return _reject(ErrorCode.PARSE_ERROR, str(e))


def decode_structured(raw: str | bytes, *, max_size: ByteSize | int | None = None) -> Result[JsonStructured, str]:
    """Decode JSON and require an object or array at the top level.

    Scalars (numbers, strings, booleans, null) are rejected. Failures from
    decode() are returned unchanged.
    """
    res = decode(raw, max_size=max_size)
    if res.is_failure():
        return res
    data = res.unwrap()
    if not isinstance(data, (dict, list)):
        return _reject(ErrorCode.NOT_STRUCTURED, NOT_STRUCTURED, got=type(data).__name__)
    return Ok(data)


def decode_model(raw: str | bytes, model: type[M], *, max_size: ByteSize | int | None = None) -> Result[M, str]:
    """Decode a JSON object or array and validate it against a pydantic model.

    Example:
        >>> class User(BaseModel):
        ...     name: str
        >>> decode_model('{"name": "ada"}', User).unwrap().name
        'ada'
    """
    def validate(data: JsonStructured) -> Result[M, str]:
        try:
            return Ok(model.model_validate(data))
        except ValidationError as e:
            _log.debug("json validation failed", code=ErrorCode.VALIDATION.value, model=model.__name__,
                       errors=e.error_count())
            return Err(str(e))

    return decode_structured(raw, max_size=max_size).and_then(validate)
