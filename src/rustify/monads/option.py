"""Option monad: a value that is present (Some) or intentionally absent (Nothing).

Replaces `None` as an in-band "no value" marker with an explicit container:
- Functor: map, filter
- Monad: and_then / flat_map
- Fallbacks: or_else_value (eager), or_else (lazy)
- Extraction: unwrap, unwrap_or, unwrap_or_else, expect, to_nullable
- Bridges: from_nullable, ok_or / ok_or_else (to Result)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from rustify.foundation.errors import ContractError, NothingUnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result

T = TypeVar("T")  # Present type
U = TypeVar("U")  # Mapped / default type
E = TypeVar("E")  # Error type when bridging to Result


class Option(Generic[T]):
    """Discriminated union representing presence (Some) or absence (Nothing).

    Examples:
        >>> Some(5).map(lambda x: x * 2).unwrap()
        10
        >>> Nothing().map(lambda x: x * 2).is_absent()
        True
        >>> Option.from_nullable(None).unwrap_or("default")
        'default'

    Notes:
        - Uses __slots__; instances refuse attribute assignment
        - Every operation returns a new Option (or self)
        - Nothing is a shared singleton
    """

    __slots__ = ("_value", "_is_some")

    def __init__(self, value: T | None, is_some: bool) -> None:
        """Private constructor. Use Some() or Nothing() instead."""
        object.__setattr__(self, "_value", value if is_some else None)
        object.__setattr__(self, "_is_some", is_some)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Option is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Option is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[object, ...]:
        # copy/deepcopy would otherwise restore slots through __setattr__
        return (Option, (self._value, self._is_some))

    @classmethod
    def from_nullable(cls, value: T | None) -> Option[T]:
        """Lift a nullable value: None -> Nothing, anything else -> Some(value).

        Falsy values (0, "", [], False) are present values, not absence.
        """
        return _NOTHING if value is None else Option(value, True)

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_present(self) -> bool:
        return self._is_some

    def is_absent(self) -> bool:
        return not self._is_some

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Some value, panic on Nothing.

        Raises:
            NothingUnwrapError: If Option is Nothing
        """
        if self._is_some:
            return cast(T, self._value)
        raise NothingUnwrapError("Called unwrap() on Nothing")

    def unwrap_or(self, default: U) -> T | U:
        """Extract Some value or return default."""
        return cast(T, self._value) if self._is_some else default

    def unwrap_or_else(self, f: Callable[[], U]) -> T | U:
        """Extract Some value or compute one. f is only called on Nothing."""
        return cast(T, self._value) if self._is_some else f()

    def expect(self, message: str) -> T:
        """Extract Some value, panic with the caller's message on Nothing.

        Raises:
            NothingUnwrapError: carrying exactly `message`
        """
        if self._is_some:
            return cast(T, self._value)
        raise NothingUnwrapError(message)

    def to_nullable(self) -> T | None:
        """Inverse of from_nullable: the value as-is, or None."""
        return cast(T, self._value) if self._is_some else None

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply f to the Some value; Nothing passes through without calling f.

        Exceptions raised by f propagate to the caller.
        """
        if self._is_some:
            return Option(f(cast(T, self._value)), True)
        return _NOTHING

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """f(value) if Some, else default.

        default is evaluated by the caller before the call, whatever the
        variant. Use map_or_else when computing it is expensive.
        """
        return f(cast(T, self._value)) if self._is_some else default

    def map_or_else(self, default_fn: Callable[[], U], f: Callable[[T], U]) -> U:
        """f(value) if Some, else default_fn(). default_fn is only called on Nothing."""
        return f(cast(T, self._value)) if self._is_some else default_fn()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep Some only when predicate(value) holds."""
        if self._is_some and predicate(cast(T, self._value)):
            return self
        return _NOTHING

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an operation that may itself produce Nothing.

        Raises:
            ContractError: If f returns anything other than an Option

        Example:
            >>> def half(n: int) -> Option[int]:
            ...     return Some(n // 2) if n % 2 == 0 else Nothing()
            >>> Some(8).and_then(half).and_then(half).unwrap()
            2
            >>> Some(3).and_then(half).is_absent()
            True
        """
        if not self._is_some:
            return _NOTHING
        res = f(cast(T, self._value))
        if not isinstance(res, Option):
            raise ContractError.unexpected("and_then", "Option", res)
        return res

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Alias for and_then."""
        return self.and_then(f)

    # ─────────────────────────────────────────────────────────────────
    # Fallbacks
    # ─────────────────────────────────────────────────────────────────

    def or_else_value(self, fallback: Option[T]) -> Option[T]:
        """Return self if Some, otherwise the already-built fallback."""
        return self if self._is_some else fallback

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return self if Some, otherwise f(). f is called at most once.

        Raises:
            ContractError: If f returns anything other than an Option
        """
        if self._is_some:
            return self
        res = f()
        if not isinstance(res, Option):
            raise ContractError.unexpected("or_else", "Option", res)
        return res

    # ─────────────────────────────────────────────────────────────────
    # Side Effects
    # ─────────────────────────────────────────────────────────────────

    def if_present(self, f: Callable[[T], object]) -> None:
        """Call f(value) iff Some. f's return value is discarded."""
        if self._is_some:
            f(cast(T, self._value))

    def if_absent(self, f: Callable[[], object]) -> None:
        """Call f() iff Nothing."""
        if not self._is_some:
            f()

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """Like if_present, but returns self for chaining."""
        self.if_present(f)
        return self

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching & Conversion
    # ─────────────────────────────────────────────────────────────────

    def match(self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:
        """Exhaustive case analysis; exactly one branch runs.

        Example:
            >>> Some(2).match(some=lambda x: x + 1, nothing=lambda: 0)
            3
        """
        if self._is_some:
            return some(cast(T, self._value))
        return nothing()

    def ok_or(self, error: E) -> Result[T, E]:
        """Some(v) -> Ok(v), Nothing -> Err(error)."""
        from .result import Err, Ok

        return Ok(cast(T, self._value)) if self._is_some else Err(error)

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        """Some(v) -> Ok(v), Nothing -> Err(f()). f is only called on Nothing."""
        from .result import Err, Ok

        return Ok(cast(T, self._value)) if self._is_some else Err(f())

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Some (even Some(0) or Some(""))."""
        return self._is_some

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._is_some else "Nothing"

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Option):
            return NotImplemented
        return self._is_some == other._is_some and self._value == other._value

    def __hash__(self) -> int:
        return hash((Option, self._is_some, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the Some value (0 or 1 elements)."""
        if self._is_some:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════

_NOTHING: Option = Option(None, False)


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct Some variant. Some(None) is allowed and stays present."""
    return Option(value, True)


def Nothing() -> Option[T]:  # noqa: N802
    """Return the Nothing variant."""
    return _NOTHING


def from_nullable(value: T | None) -> Option[T]:
    """Module-level spelling of Option.from_nullable."""
    return Option.from_nullable(value)
