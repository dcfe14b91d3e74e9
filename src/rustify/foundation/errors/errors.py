"""Exceptions raised by the containers.

Failures are normally carried as data (Nothing / Err). Exceptions are reserved
for unconditional unwraps on the wrong variant and for callbacks that break the
chaining contract by returning something other than a container.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Standard error codes for container and decoding failures.

    Unwrap/contract codes tag raised exceptions; the decoding codes tag
    Err payloads in log records.
    """
    UNWRAP_NOTHING = "UNWRAP_NOTHING"
    UNWRAP_ERR = "UNWRAP_ERR"
    UNWRAP_OK = "UNWRAP_OK"
    CONTRACT_VIOLATION = "CONTRACT_VIOLATION"
    EMPTY_INPUT = "EMPTY_INPUT"
    TOO_LARGE = "TOO_LARGE"
    PARSE_ERROR = "PARSE_ERROR"
    NOT_STRUCTURED = "NOT_STRUCTURED"
    VALIDATION = "VALIDATION"


class RustifyError(Exception):
    """Base for every exception raised by rustify."""

    code: ErrorCode = ErrorCode.CONTRACT_VIOLATION

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnwrapError(RustifyError, RuntimeError):
    """Unconditional extraction on the variant that does not hold the payload.

    `value` is whatever the container held instead (None for Nothing), so a
    boundary handler can still report the error that caused the panic.
    """

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class NothingUnwrapError(UnwrapError):
    """unwrap()/expect() on Nothing."""

    code = ErrorCode.UNWRAP_NOTHING


class ErrUnwrapError(UnwrapError):
    """unwrap()/expect() on Err."""

    code = ErrorCode.UNWRAP_ERR


class OkUnwrapError(UnwrapError):
    """unwrap_error()/expect_error() on Ok."""

    code = ErrorCode.UNWRAP_OK


class ContractError(RustifyError, TypeError):
    """A chaining callback returned something other than the expected container."""

    code = ErrorCode.CONTRACT_VIOLATION

    @classmethod
    def unexpected(cls, operation: str, expected: str, got: object) -> ContractError:
        """Build the standard message for a callback returning the wrong type."""
        article = "an" if expected[0] in "AEIOU" else "a"
        return cls(f"{operation} callback must return {article} {expected}, got {type(got).__name__}")
