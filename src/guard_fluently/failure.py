"""
Failure description — structured error information for violated guards.

Three kinds of failure exist, each with its own ErrorCode and exception:

  - ARGUMENT_CONTRACT_VIOLATION → ArgumentContractError
    the caller passed an invalid argument to the guard method itself
    (None pattern, empty candidate set, invalid regex)
  - NULL_SUBJECT → NullSubjectError
    the subject had to be non-None for the requested check
  - ASSERTION_FAILED → GuardAssertionError
    the subject did not satisfy the predicate

NullSubjectError is a GuardAssertionError, ArgumentContractError is not:

    GuardError (ValueError)
     ├── ArgumentContractError
     └── GuardAssertionError
          └── NullSubjectError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Any


@unique
class ErrorCode(Enum):
    """Structured error codes, one per failure kind."""

    ARGUMENT_CONTRACT_VIOLATION = "ARGUMENT_CONTRACT_VIOLATION"
    """Misuse of the guard API itself (bad pattern, empty candidates)."""

    NULL_SUBJECT = "NULL_SUBJECT"
    """The subject was None where a value is required."""

    ASSERTION_FAILED = "ASSERTION_FAILED"
    """The subject did not satisfy the requested predicate."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor attached to every raised guard error.

    >>> desc = FailureDescription(ErrorCode.ASSERTION_FAILED, "must be 'A'", name="code")
    >>> desc.code
    <ErrorCode.ASSERTION_FAILED: 'ASSERTION_FAILED'>
    >>> desc.name
    'code'
    """

    code: ErrorCode
    message: str
    name: str = ""
    subject_type: str = ""
    expected: Any = field(default=None, repr=False, compare=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC), compare=False)

    @staticmethod
    def create(
        code: ErrorCode,
        message: str,
        name: str = "",
        subject_type: str = "",
        expected: Any = None,
    ) -> FailureDescription:
        """Factory method mirroring the exception constructors."""
        return FailureDescription(
            code=code,
            message=message,
            name=name,
            subject_type=subject_type,
            expected=expected,
        )


class GuardError(ValueError):
    """Base class of every error raised by a guard."""

    code: ErrorCode = ErrorCode.ASSERTION_FAILED

    def __init__(self, failure: FailureDescription) -> None:
        super().__init__(failure.message)
        self.failure = failure

    @property
    def name(self) -> str:
        """Diagnostic name of the guarded value (or of the offending argument)."""
        return self.failure.name


class ArgumentContractError(GuardError):
    """An argument passed to the guard method was invalid."""

    code = ErrorCode.ARGUMENT_CONTRACT_VIOLATION


class GuardAssertionError(GuardError):
    """The guarded value did not satisfy the predicate."""

    code = ErrorCode.ASSERTION_FAILED


class NullSubjectError(GuardAssertionError):
    """The guarded value was None where a value is required."""

    code = ErrorCode.NULL_SUBJECT


_ERROR_TYPES: dict[ErrorCode, type[GuardError]] = {
    ErrorCode.ARGUMENT_CONTRACT_VIOLATION: ArgumentContractError,
    ErrorCode.NULL_SUBJECT: NullSubjectError,
    ErrorCode.ASSERTION_FAILED: GuardAssertionError,
}


def error_type_for(code: ErrorCode) -> type[GuardError]:
    """Map an ErrorCode to the exception class raised for it."""
    return _ERROR_TYPES[code]
