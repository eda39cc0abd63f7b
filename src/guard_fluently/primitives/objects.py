"""Guards over arbitrary objects."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from guard_fluently.checks import Guard
from guard_fluently.config import get_settings
from guard_fluently.constraints import AndConstraint
from guard_fluently.primitives import reference
from guard_fluently.primitives.reference import unsupported_eq

T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False)
class ObjectGuards(Generic[T]):
    """
    Checks that an object is in the expected state.

    Equality uses ==, identity uses `is`. The subject may be None; only
    not_be_null() treats that as a failure by itself.

        should(order).not_be_null().and_.be_assignable_to(Order)
    """

    subject: T | None
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", get_settings().default_name)

    # ──────────────────────── Equality ────────────────────────

    def be(self, expected: T | None) -> AndConstraint[ObjectGuards[T]]:
        """Subject must compare equal to expected."""
        Guard.is_equal_to(self.subject, expected, self.name)
        return AndConstraint(self)

    def not_be(self, unexpected: T | None) -> AndConstraint[ObjectGuards[T]]:
        """Subject must not compare equal to unexpected."""
        Guard.is_not_equal_to(self.subject, unexpected, self.name)
        return AndConstraint(self)

    def be_one_of(self, *valid_values: T | None) -> AndConstraint[ObjectGuards[T]]:
        """
        Subject must equal one of the positional candidates.

        Candidates are never unpacked: the subject may itself be a collection,
        so should([1, 2]).be_one_of([1, 2], [3]) passes while
        should(1).be_one_of([1, 2]) fails. Spread a list with be_one_of(*values).
        """
        reference.be_one_of(self.subject, valid_values, self.name)
        return AndConstraint(self)

    def not_be_one_of(self, *invalid_values: T | None) -> AndConstraint[ObjectGuards[T]]:
        """Subject must equal none of the positional candidates, compared as given."""
        reference.not_be_one_of(self.subject, invalid_values, self.name)
        return AndConstraint(self)

    # ──────────────────────── Null / identity ────────────────────────

    def be_null(self) -> AndConstraint[ObjectGuards[T]]:
        reference.be_null(self.subject, self.name)
        return AndConstraint(self)

    def not_be_null(self) -> AndConstraint[ObjectGuards[T]]:
        """Subject must not be None. Raises NullSubjectError."""
        reference.not_be_null(self.subject, self.name)
        return AndConstraint(self)

    def be_same_as(self, expected: T | None) -> AndConstraint[ObjectGuards[T]]:
        """Subject must be the very object expected refers to."""
        reference.be_same_as(self.subject, expected, self.name)
        return AndConstraint(self)

    def not_be_same_as(self, unexpected: T | None) -> AndConstraint[ObjectGuards[T]]:
        reference.not_be_same_as(self.subject, unexpected, self.name)
        return AndConstraint(self)

    # ──────────────────────── Types ────────────────────────

    def be_of_type(self, expected_type: type) -> AndConstraint[ObjectGuards[T]]:
        """type(subject) must be exactly expected_type; subclasses do not count."""
        reference.be_of_type(self.subject, expected_type, self.name)
        return AndConstraint(self)

    def not_be_of_type(self, unexpected_type: type) -> AndConstraint[ObjectGuards[T]]:
        reference.not_be_of_type(self.subject, unexpected_type, self.name)
        return AndConstraint(self)

    def be_assignable_to(self, target_type: type) -> AndConstraint[ObjectGuards[T]]:
        """Subject must be an instance of target_type (subclasses count)."""
        reference.be_assignable_to(self.subject, target_type, self.name)
        return AndConstraint(self)

    def not_be_assignable_to(self, target_type: type) -> AndConstraint[ObjectGuards[T]]:
        reference.not_be_assignable_to(self.subject, target_type, self.name)
        return AndConstraint(self)

    # ──────────────────────── Predicates ────────────────────────

    def match(self, predicate: Callable[[T], bool]) -> AndConstraint[ObjectGuards[T]]:
        """predicate(subject) must be truthy."""
        reference.match(self.subject, predicate, self.name)
        return AndConstraint(self)

    def not_match(self, predicate: Callable[[T], bool]) -> AndConstraint[ObjectGuards[T]]:
        reference.not_match(self.subject, predicate, self.name)
        return AndConstraint(self)

    __eq__ = unsupported_eq
    __hash__ = object.__hash__
