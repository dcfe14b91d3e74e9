"""Type aliases shared across rustify."""

from __future__ import annotations

from typing import Any, Union

# Any for the recursive slots keeps pydantic from trying to resolve the cycle
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]
JsonStructured = Union[list[Any], dict[str, Any]]
