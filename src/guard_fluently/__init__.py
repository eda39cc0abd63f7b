"""
Fluent guard clauses for Python.

Preconditions read as sentences and fail fast with a descriptive error:

    from guard_fluently import should

    def register(user_name: str, age: int) -> None:
        should(user_name, "user_name").not_be_null_or_white_space().and_.have_length_less_than(64)
        should(age, "age").be_assignable_to(int).and_.match(lambda a: a >= 18)

Every guard error is a ValueError carrying a FailureDescription:

    try:
        should("", "code").not_be_empty()
    except GuardAssertionError as e:
        e.failure.code  # ErrorCode.ASSERTION_FAILED
"""

from guard_fluently.checks import Guard
from guard_fluently.config import GuardSettings, get_settings, reset_settings
from guard_fluently.constraints import AndConstraint
from guard_fluently.extensions import should, should_bool, should_object, should_str
from guard_fluently.failure import (
    ArgumentContractError,
    ErrorCode,
    FailureDescription,
    GuardAssertionError,
    GuardError,
    NullSubjectError,
)
from guard_fluently.guard_failures import GuardFailures
from guard_fluently.primitives import BooleanGuards, ObjectGuards, StringGuards

__all__ = [
    "should",
    "should_bool",
    "should_str",
    "should_object",
    "AndConstraint",
    "BooleanGuards",
    "ObjectGuards",
    "StringGuards",
    "Guard",
    "GuardFailures",
    "ErrorCode",
    "FailureDescription",
    "GuardError",
    "ArgumentContractError",
    "GuardAssertionError",
    "NullSubjectError",
    "GuardSettings",
    "get_settings",
    "reset_settings",
]

__version__ = "1.0.0"
