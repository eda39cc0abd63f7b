"""
Primitive checks, the building blocks the fluent guards are made of.

Each Guard method checks one condition on a value and raises the matching
guard error when it does not hold. The methods are usable on their own:

    Guard.is_not_null(order, "order")
    Guard.has_size_less_than_or_equal_to(name, 100, "name")

Fluent wrappers (primitives/) layer argument validation, naming and chaining
on top of these.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from guard_fluently.guard_failures import GuardFailures, describe, type_name


class Guard:
    """Static primitive checks raising guard errors."""

    # ──────────────────────── Null ────────────────────────

    @staticmethod
    def is_null(value: Any, name: str) -> None:
        """Value must be None."""
        if value is not None:
            raise GuardFailures.assertion_failed(
                name, value, f"must be None, was {describe(value)}."
            )

    @staticmethod
    def is_not_null(value: Any, name: str, subject_type: str = "") -> None:
        """Value must not be None. Raises NullSubjectError."""
        if value is None:
            raise GuardFailures.null_subject(name, subject_type)

    # ──────────────────────── Equality / identity ────────────────────────

    @staticmethod
    def is_equal_to(value: Any, target: Any, name: str) -> None:
        """Value must compare equal (==) to target."""
        if not value == target:
            raise GuardFailures.assertion_failed(
                name, value, f"must be equal to {describe(target)}, was {describe(value)}.", target
            )

    @staticmethod
    def is_not_equal_to(value: Any, target: Any, name: str) -> None:
        """Value must not compare equal (==) to target."""
        if value == target:
            raise GuardFailures.assertion_failed(
                name, value, f"must not be equal to {describe(target)}.", target
            )

    @staticmethod
    def is_reference_equal_to(value: Any, target: Any, name: str) -> None:
        """Value must be the very same object as target."""
        if value is not target:
            raise GuardFailures.assertion_failed(
                name, value, "must point to the same object as the expected one.", target
            )

    @staticmethod
    def is_reference_not_equal_to(value: Any, target: Any, name: str) -> None:
        """Value must be a different object than target."""
        if value is target:
            raise GuardFailures.assertion_failed(
                name, value, "must not point to the same object as the unexpected one.", target
            )

    # ──────────────────────── Types ────────────────────────

    @staticmethod
    def is_of_type(value: Any, expected_type: type, name: str) -> None:
        """type(value) must be exactly expected_type."""
        if type(value) is not expected_type:
            raise GuardFailures.assertion_failed(
                name, value, f"must be of type {expected_type.__name__}.", expected_type
            )

    @staticmethod
    def is_not_of_type(value: Any, unexpected_type: type, name: str) -> None:
        """type(value) must not be exactly unexpected_type."""
        if type(value) is unexpected_type:
            raise GuardFailures.assertion_failed(
                name, value, f"must not be of type {unexpected_type.__name__}.", unexpected_type
            )

    @staticmethod
    def is_assignable_to_type(value: Any, target_type: type, name: str) -> None:
        """Value must be an instance of target_type or of one of its subclasses."""
        if not isinstance(value, target_type):
            raise GuardFailures.assertion_failed(
                name, value, f"must be assignable to type {target_type.__name__}.", target_type
            )

    @staticmethod
    def is_not_assignable_to_type(value: Any, target_type: type, name: str) -> None:
        """Value must not be an instance of target_type."""
        if isinstance(value, target_type):
            raise GuardFailures.assertion_failed(
                name, value, f"must not be assignable to type {target_type.__name__}.", target_type
            )

    # ──────────────────────── Booleans ────────────────────────

    @staticmethod
    def is_true(value: bool, name: str, message: str = "") -> None:
        """Value must be True. message is appended to the failure text."""
        if value is not True:
            raise GuardFailures.assertion_failed(
                name, value, _with_message("must be True, was False.", message), True
            )

    @staticmethod
    def is_false(value: bool, name: str, message: str = "") -> None:
        """Value must be False. message is appended to the failure text."""
        if value is not False:
            raise GuardFailures.assertion_failed(
                name, value, _with_message("must be False, was True.", message), False
            )

    # ──────────────────────── Strings ────────────────────────

    @staticmethod
    def is_empty(text: str | None, name: str) -> None:
        """Text must be the empty string."""
        Guard.is_not_null(text, name, "str")
        if text != "":
            raise GuardFailures.assertion_failed(
                name, text, f"must be empty, was {describe(text)}."
            )

    @staticmethod
    def is_not_empty(text: str | None, name: str) -> None:
        """Text must not be the empty string."""
        Guard.is_not_null(text, name, "str")
        if text == "":
            raise GuardFailures.assertion_failed(name, text, "must not be empty.")

    @staticmethod
    def is_null_or_empty(text: str | None, name: str) -> None:
        """Text must be None or empty."""
        if text:
            raise GuardFailures.assertion_failed(
                name, text, f"must be None or empty, was {describe(text)}."
            )

    @staticmethod
    def is_not_null_or_empty(text: str | None, name: str) -> None:
        """Text must be neither None (NullSubjectError) nor empty."""
        Guard.is_not_null(text, name, "str")
        if not text:
            raise GuardFailures.assertion_failed(name, text, "must not be None or empty.")

    @staticmethod
    def is_null_or_white_space(text: str | None, name: str) -> None:
        """Text must be None, empty or whitespace only."""
        if text is not None and text.strip():
            raise GuardFailures.assertion_failed(
                name, text, f"must be None or whitespace, was {describe(text)}."
            )

    @staticmethod
    def is_not_null_or_white_space(text: str | None, name: str) -> None:
        """Text must contain at least one non-whitespace character."""
        Guard.is_not_null(text, name, "str")
        if not text.strip():  # type: ignore[union-attr]
            raise GuardFailures.assertion_failed(
                name, text, f"must not be None or whitespace, was {describe(text)}."
            )

    # ──────────────────────── Sizes ────────────────────────

    @staticmethod
    def has_size_equal_to(value: Sized, size: int, name: str) -> None:
        """len(value) must equal size."""
        if len(value) != size:
            raise GuardFailures.assertion_failed(
                name, value, f"must have a size equal to {size}, had a size of {len(value)}.", size
            )

    @staticmethod
    def has_size_less_than(value: Sized, size: int, name: str) -> None:
        """len(value) must be strictly below size."""
        if len(value) >= size:
            raise GuardFailures.assertion_failed(
                name, value, f"must have a size less than {size}, had a size of {len(value)}.", size
            )

    @staticmethod
    def has_size_less_than_or_equal_to(value: Sized, size: int, name: str) -> None:
        """len(value) must not exceed size."""
        if len(value) > size:
            raise GuardFailures.assertion_failed(
                name,
                value,
                f"must have a size less than or equal to {size}, had a size of {len(value)}.",
                size,
            )

    @staticmethod
    def has_size_greater_than(value: Sized, size: int, name: str) -> None:
        """len(value) must be strictly above size."""
        if len(value) <= size:
            raise GuardFailures.assertion_failed(
                name, value, f"must have a size greater than {size}, had a size of {len(value)}.", size
            )

    @staticmethod
    def has_size_greater_than_or_equal_to(value: Sized, size: int, name: str) -> None:
        """len(value) must be at least size."""
        if len(value) < size:
            raise GuardFailures.assertion_failed(
                name,
                value,
                f"must have a size greater than or equal to {size}, had a size of {len(value)}.",
                size,
            )


def _with_message(text: str, message: str) -> str:
    return f"{text} {message}" if message else text
