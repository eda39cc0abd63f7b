"""
Convenience factory methods for guard errors.

Every error a guard raises is built here, so message layout, the attached
FailureDescription and the failure log event stay consistent:

    raise GuardFailures.assertion_failed(name, subject, "must be 'A'.")

The factories return the exception instead of raising it so the raise
statement (and the traceback) stays at the guard that detected the failure.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog

from guard_fluently.config import get_settings
from guard_fluently.failure import (
    ArgumentContractError,
    ErrorCode,
    FailureDescription,
    GuardAssertionError,
    GuardError,
    NullSubjectError,
)

log = structlog.get_logger()


def type_name(value: Any) -> str:
    """Name of the runtime type of value, as shown in failure messages."""
    return type(value).__name__


def describe(value: Any) -> str:
    """repr() of value, shortened to the configured maximum length."""
    text = repr(value)
    limit = get_settings().max_value_length
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def describe_all(values: Any) -> str:
    """Comma-separated reprs, as used for candidate lists."""
    return ", ".join(describe(v) for v in values)


class GuardFailures:
    """Factory methods for the three guard failure kinds."""

    @staticmethod
    def argument_error(argument: str, message: str) -> ArgumentContractError:
        """Invalid argument given to a guard method (None pattern, empty candidates)."""
        failure = FailureDescription.create(
            ErrorCode.ARGUMENT_CONTRACT_VIOLATION,
            f"{message} (Parameter '{argument}')",
            name=argument,
        )
        return _logged(ArgumentContractError(failure))

    @staticmethod
    def null_subject(name: str, subject_type: str = "") -> NullSubjectError:
        """Subject is None where the check needs a value."""
        failure = FailureDescription.create(
            ErrorCode.NULL_SUBJECT,
            f"Parameter \"{name}\" ({subject_type or 'object'}) must be not None.",
            name=name,
            subject_type=subject_type,
        )
        return _logged(NullSubjectError(failure))

    @staticmethod
    def assertion_failed(
        name: str,
        subject: Any,
        requirement: str,
        expected: Any = None,
    ) -> GuardAssertionError:
        """
        Subject does not satisfy the predicate.

        requirement completes the sentence 'Parameter "name" (type) ...',
        e.g. "must be one of 'A', 'B'.".
        """
        subject_type = type_name(subject)
        failure = FailureDescription.create(
            ErrorCode.ASSERTION_FAILED,
            f"Parameter \"{name}\" ({subject_type}) {requirement}",
            name=name,
            subject_type=subject_type,
            expected=expected,
        )
        return _logged(GuardAssertionError(failure))


E = TypeVar("E", bound=GuardError)


def _logged(error: E) -> E:
    """Emit the failure log event (when enabled) and hand the error back."""
    if get_settings().log_failures:
        log.debug(
            "guard.failed",
            code=error.failure.code.value,
            name=error.failure.name,
            subject_type=error.failure.subject_type,
            message=error.failure.message,
        )
    return error
