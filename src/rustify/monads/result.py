"""Result/Either monad for explicit success-or-failure values.

Implements a discriminated union for success/failure with full monadic operations:
- Functor: map, map_error
- Monad: and_then / flat_map
- Bifunctor: bimap
- Fallbacks: or_else_value (eager), or_else (lazy, receives the error)
- Railway-oriented composition and collection helpers
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from rustify.foundation.errors import ContractError, ErrUnwrapError, OkUnwrapError

from .option import Nothing, Option, Some

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> result: Result[int, str] = Ok(42)
        >>> result.map(lambda x: x * 2).unwrap()
        84

        >>> error: Result[int, str] = Err("failed")
        >>> error.map(lambda x: x * 2).unwrap_error()
        'failed'

        Railway-oriented programming:
        >>> def validate_positive(x: int) -> Result[int, str]:
        ...     return Ok(x) if x > 0 else Err("must be positive")
        >>>
        >>> result = (
        ...     Ok(5)
        ...     .and_then(validate_positive)
        ...     .map(lambda x: x * 2)
        ... )
        >>> assert result.unwrap() == 10

    Notes:
        - Uses __slots__; instances refuse attribute assignment
        - All operations return a new Result (or self)
        - Callbacks on the non-matching variant are never invoked
    """

    __slots__ = ("_value", "_is_ok")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Result is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Result is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[object, ...]:
        return (Result, (self._value, self._is_ok))

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_failure(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value, panic on Err.

        Raises:
            ErrUnwrapError: If Result is Err (the error is kept on `.value`)
        """
        if self._is_ok:
            return cast(T, self._value)
        raise ErrUnwrapError(f"Called unwrap() on Err: {self._value!r}", self._value)

    def unwrap_error(self) -> E:
        """Extract Err value, panic on Ok.

        Raises:
            OkUnwrapError: If Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise OkUnwrapError(f"Called unwrap_error() on Ok: {self._value!r}", self._value)

    def unwrap_or(self, default: U) -> T | U:
        """Extract Ok value or return default."""
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, f: Callable[[E], U]) -> T | U:
        """Extract Ok value or compute one from the error."""
        return cast(T, self._value) if self._is_ok else f(cast(E, self._value))

    def expect(self, message: str) -> T:
        """Extract Ok value, panic with the caller's message on Err.

        Raises:
            ErrUnwrapError: carrying exactly `message`
        """
        if self._is_ok:
            return cast(T, self._value)
        raise ErrUnwrapError(message, self._value)

    def expect_error(self, message: str) -> E:
        """Extract Err value, panic with the caller's message on Ok.

        Raises:
            OkUnwrapError: carrying exactly `message`
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise OkUnwrapError(message, self._value)

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map function over Ok value (Functor).

        Applies f only if Ok, preserves Err unchanged.

        Type signature: Result[T, E] -> (T -> U) -> Result[U, E]
        """
        if self._is_ok:
            return Ok(f(cast(T, self._value)))
        return cast(Result[U, E], self)

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map function over Err value (Error Functor).

        Useful for transforming error types while preserving Ok values.

        Type signature: Result[T, E] -> (E -> F) -> Result[T, F]
        """
        if not self._is_ok:
            return Err(f(cast(E, self._value)))
        return cast(Result[T, F], self)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """f(value) if Ok, else default (eager)."""
        return f(cast(T, self._value)) if self._is_ok else default

    def map_or_else(self, default_fn: Callable[[E], U], f: Callable[[T], U]) -> U:
        """f(value) if Ok, else default_fn(error)."""
        return f(cast(T, self._value)) if self._is_ok else default_fn(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Bifunctor Operations
    # ─────────────────────────────────────────────────────────────────

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Map both Ok and Err values (Bifunctor).

        Type signature: Result[T, E] -> (T -> U, E -> F) -> Result[U, F]
        """
        if self._is_ok:
            return Ok(ok_fn(cast(T, self._value)))
        return Err(err_fn(cast(E, self._value)))

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=) - chain operations that can fail.

        Err short-circuits: f is not called and the error is carried through.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]

        Raises:
            ContractError: If f returns anything other than a Result

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     try:
            ...         return Ok(int(s))
            ...     except ValueError:
            ...         return Err(f"invalid int: {s}")
            >>>
            >>> def validate_positive(n: int) -> Result[int, str]:
            ...     return Ok(n) if n > 0 else Err("must be positive")
            >>>
            >>> result = (
            ...     Ok("42")
            ...     .and_then(parse_int)
            ...     .and_then(validate_positive)
            ... )
            >>> assert result.unwrap() == 42
        """
        if not self._is_ok:
            return cast(Result[U, E], self)
        res = f(cast(T, self._value))
        if not isinstance(res, Result):
            raise ContractError.unexpected("and_then", "Result", res)
        return res

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for and_then."""
        return self.and_then(f)

    def or_else_value(self, fallback: Result[T, E]) -> Result[T, E]:
        """Return self if Ok, otherwise the already-built fallback."""
        return self if self._is_ok else fallback

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Err by calling f(error) exactly once; Ok passes through.

        Type signature: Result[T, E] -> (E -> Result[T, F]) -> Result[T, F]

        Raises:
            ContractError: If f returns anything other than a Result
        """
        if self._is_ok:
            return cast(Result[T, F], self)
        res = f(cast(E, self._value))
        if not isinstance(res, Result):
            raise ContractError.unexpected("or_else", "Result", res)
        return res

    # ─────────────────────────────────────────────────────────────────
    # Side Effects
    # ─────────────────────────────────────────────────────────────────

    def if_success(self, f: Callable[[T], object]) -> None:
        """Call f(value) iff Ok."""
        if self._is_ok:
            f(cast(T, self._value))

    def if_failure(self, f: Callable[[E], object]) -> None:
        """Call f(error) iff Err."""
        if not self._is_ok:
            f(cast(E, self._value))

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call function with Ok value for side effects, return self."""
        self.if_success(f)
        return self

    def inspect_error(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call function with Err value for side effects, return self."""
        self.if_failure(f)
        return self

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching
    # ─────────────────────────────────────────────────────────────────

    def match(
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[E], U],
    ) -> U:
        """Pattern match on Result variants.

        Exhaustive case analysis - forces handling both cases.

        Example:
            >>> result = Ok(42)
            >>> output = result.match(
            ...     ok=lambda x: f"success: {x}",
            ...     err=lambda e: f"failed: {e}"
            ... )
            >>> assert output == "success: 42"
        """
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def ok(self) -> Option[T]:
        """Some(value) if Ok, Nothing if Err."""
        return Some(cast(T, self._value)) if self._is_ok else Nothing()

    def err(self) -> Option[E]:
        """Some(error) if Err, Nothing if Ok."""
        return Some(cast(E, self._value)) if not self._is_ok else Nothing()

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Flatten nested Result (join in monad terms).

        Result[Result[T, E], E] -> Result[T, E]
        """
        if not self._is_ok:
            return cast(Result[T, E], self)
        if not isinstance(self._value, Result):
            raise ContractError.unexpected("flatten", "Result", self._value)
        return self._value

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Enable truthiness checking (True if Ok)."""
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        return f"{variant}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((Result, self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Iterate over Ok value (yields 0 or 1 element)."""
        if self._is_ok:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success).

    Type signature: T -> Result[T, E]
    """
    return Result(value, is_ok=True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure).

    Type signature: E -> Result[T, E]
    """
    return Result(error, is_ok=False)


def attempt(fn: Callable[[], T], *exceptions: type[BaseException]) -> Result[T, BaseException]:
    """Run fn, capturing the listed exception types as Err.

    Exceptions not listed (default: Exception) propagate unchanged.

    Example:
        >>> attempt(lambda: int("42")).unwrap()
        42
        >>> attempt(lambda: int("x"), ValueError).is_failure()
        True
    """
    try:
        return Ok(fn())
    except exceptions or (Exception,) as e:
        return Err(e)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def _require_result(operation: str, item: object) -> None:
    if not isinstance(item, Result):
        raise ContractError(f"{operation} expects Result items, got {type(item).__name__}")


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert list of Results to Result of list.

    Fails fast on first Err, returns Ok with all values if all succeed.

    Example:
        >>> sequence([Ok(1), Ok(2), Ok(3)]).unwrap()
        [1, 2, 3]
        >>> sequence([Ok(1), Err("fail"), Ok(3)]).unwrap_error()
        'fail'
    """
    values: list[T] = []
    for result in results:
        _require_result("sequence", result)
        if not result._is_ok:
            return cast(Result[list[T], E], result)
        values.append(cast(T, result._value))
    return Ok(values)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map function returning Result over items, collect into Result of list.

    Stops calling f after the first Err.
    """
    return sequence(f(item) for item in items)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating all errors if any fail.

    Unlike sequence, this doesn't fail fast - it collects ALL errors.

    Example:
        >>> collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")]).unwrap_error()
        ['e1', 'e2']
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        _require_result("collect_results", result)
        if result._is_ok:
            values.append(cast(T, result._value))
        else:
            errors.append(cast(E, result._value))
    return Ok(values) if not errors else Err(errors)
