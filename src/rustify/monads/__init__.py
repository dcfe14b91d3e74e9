"""Option and Result containers.

Provides Option/Result types for explicit absence and failure with:
- Railway-oriented programming patterns
- Functor/Monad/Bifunctor operations
- Lazy fallbacks whose callbacks run at most once
- Free-function shorthands for construction and matching

Example:
    >>> from rustify.monads import Result, Ok, Err
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("division by zero")
    ...     return Ok(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .and_then(lambda x: Ok(x + 1))
    ... )
    >>> assert result.unwrap() == 11.0
"""

from .functions import (
    absent,
    failure,
    if_present_do,
    if_success_do,
    match_option,
    match_result,
    option_or_value,
    present,
    result_or_value,
    success,
)
from .option import Nothing, Option, Some, from_nullable
from .result import Err, Ok, Result, attempt, collect_results, sequence, traverse

__all__ = [
    # Core types
    "Option", "Some", "Nothing", "from_nullable",
    "Result", "Ok", "Err", "attempt",
    # Shorthands
    "present", "absent", "success", "failure",
    "if_present_do", "if_success_do",
    "match_option", "match_result",
    "option_or_value", "result_or_value",
    # Collection operations
    "sequence", "traverse", "collect_results",
]
