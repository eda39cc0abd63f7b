"""
Checks shared by every guard over an arbitrary (possibly None) subject.

ObjectGuards and StringGuards both expose null, identity, type, predicate
and membership checks; they delegate to these functions instead of sharing
a base class.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn

from guard_fluently.checks import Guard
from guard_fluently.guard_failures import GuardFailures, describe_all


def be_null(subject: Any, name: str) -> None:
    Guard.is_null(subject, name)


def not_be_null(subject: Any, name: str, subject_type: str = "") -> None:
    Guard.is_not_null(subject, name, subject_type)


def be_same_as(subject: Any, expected: Any, name: str) -> None:
    Guard.is_reference_equal_to(subject, expected, name)


def not_be_same_as(subject: Any, unexpected: Any, name: str) -> None:
    Guard.is_reference_not_equal_to(subject, unexpected, name)


def be_of_type(subject: Any, expected_type: type, name: str) -> None:
    Guard.is_of_type(subject, _require_type(expected_type, "expected_type"), name)


def not_be_of_type(subject: Any, unexpected_type: type, name: str) -> None:
    Guard.is_not_of_type(subject, _require_type(unexpected_type, "unexpected_type"), name)


def be_assignable_to(subject: Any, target_type: type, name: str) -> None:
    Guard.is_assignable_to_type(subject, _require_type(target_type, "target_type"), name)


def not_be_assignable_to(subject: Any, target_type: type, name: str) -> None:
    Guard.is_not_assignable_to_type(subject, _require_type(target_type, "target_type"), name)


def match(subject: Any, predicate: Callable[[Any], bool], name: str) -> None:
    """Subject must satisfy predicate."""
    if not _require_predicate(predicate)(subject):
        raise GuardFailures.assertion_failed(name, subject, "must match the predicate.")


def not_match(subject: Any, predicate: Callable[[Any], bool], name: str) -> None:
    """Subject must not satisfy predicate."""
    if _require_predicate(predicate)(subject):
        raise GuardFailures.assertion_failed(name, subject, "must not match the predicate.")


def be_one_of(subject: Any, candidates: Iterable[Any] | None, name: str) -> None:
    """Subject must equal one of the candidates. None is an ordinary value here."""
    values = require_values(candidates, "valid_values", "Can not check with None or empty value.")
    if subject not in values:
        raise GuardFailures.assertion_failed(
            name, subject, f"must be one of {describe_all(values)}.", values
        )


def not_be_one_of(subject: Any, candidates: Iterable[Any] | None, name: str) -> None:
    """Subject must equal none of the candidates."""
    values = require_values(candidates, "valid_values", "Can not check with None or empty value.")
    if subject in values:
        raise GuardFailures.assertion_failed(
            name, subject, f"must not be one of {describe_all(values)}.", values
        )


def require_values(values: Iterable[Any] | None, argument: str, message: str) -> list[Any]:
    """Materialize a candidate collection, rejecting None and empty ones."""
    materialized = list(values) if values is not None else []
    if not materialized:
        raise GuardFailures.argument_error(argument, message)
    return materialized


def unsupported_eq(guard: object, other: object) -> NoReturn:
    raise TypeError(
        f"Comparing {type(guard).__name__} objects is not supported. "
        "Did you mean .be() instead of ==?"
    )


def _require_type(value: Any, argument: str) -> type:
    if not isinstance(value, type):
        raise GuardFailures.argument_error(argument, f"Expected a type, got {value!r}.")
    return value


def _require_predicate(predicate: Any) -> Callable[[Any], bool]:
    if predicate is None or not callable(predicate):
        raise GuardFailures.argument_error("predicate", "Cannot match against a non-callable predicate.")
    return predicate
