"""Shorthand free functions over Option and Result.

Lets call sites construct and dispatch without naming the container type:

    >>> from rustify import present, absent, match_option
    >>> match_option(present(7), lambda x: x + 1, lambda: 0)
    8
    >>> match_option(absent(), lambda x: x + 1, lambda: 0)
    0
"""

from __future__ import annotations

from typing import Callable, TypeVar

from rustify.foundation.errors import ContractError

from .option import Nothing, Option, Some
from .result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


def _require(value: object, kind: type, operation: str) -> None:
    if not isinstance(value, kind):
        raise ContractError(f"{operation} expects {'an' if kind is Option else 'a'} {kind.__name__}, "
                            f"got {type(value).__name__}")


# ─────────────────────────────────────────────────────────────────────────────
# Constructors
# ─────────────────────────────────────────────────────────────────────────────


def present(value: T) -> Option[T]:
    return Some(value)


def absent() -> Option[T]:
    return Nothing()


def success(value: T) -> Result[T, E]:
    return Ok(value)


def failure(error: E) -> Result[T, E]:
    return Err(error)


# ─────────────────────────────────────────────────────────────────────────────
# "if let" style
# ─────────────────────────────────────────────────────────────────────────────


def if_present_do(opt: Option[T], f: Callable[[T], object]) -> None:
    """Call f(value) only when opt is Some."""
    _require(opt, Option, "if_present_do")
    opt.if_present(f)


def if_success_do(res: Result[T, E], f: Callable[[T], object]) -> None:
    """Call f(value) only when res is Ok."""
    _require(res, Result, "if_success_do")
    res.if_success(f)


# ─────────────────────────────────────────────────────────────────────────────
# Matching
# ─────────────────────────────────────────────────────────────────────────────


def match_option(opt: Option[T], on_present: Callable[[T], U], on_absent: Callable[[], U]) -> U:
    """Two-way dispatch on Option; exactly one branch runs and its value is returned."""
    _require(opt, Option, "match_option")
    return opt.match(some=on_present, nothing=on_absent)


def match_result(res: Result[T, E], on_success: Callable[[T], U], on_failure: Callable[[E], U]) -> U:
    """Two-way dispatch on Result; on_failure receives the error."""
    _require(res, Result, "match_result")
    return res.match(ok=on_success, err=on_failure)


# ─────────────────────────────────────────────────────────────────────────────
# Eager fallbacks
# ─────────────────────────────────────────────────────────────────────────────


def option_or_value(opt: Option[T], fallback: Option[T]) -> Option[T]:
    """opt if Some, else the precomputed fallback."""
    _require(opt, Option, "option_or_value")
    return opt.or_else_value(fallback)


def result_or_value(res: Result[T, E], fallback: Result[T, E]) -> Result[T, E]:
    """res if Ok, else the precomputed fallback."""
    _require(res, Result, "result_or_value")
    return res.or_else_value(fallback)
