"""
Guards over str subjects.

Comparison flavours:

  - plain methods (be, start_with, contain, match, ...) compare exactly,
    including casing and surrounding whitespace
  - *_equivalent_* methods strip surrounding whitespace and lower-case both
    sides before comparing

Arguments are validated before the subject is looked at: a None or empty
pattern, or an empty candidate list, raises ArgumentContractError. Most
checks then require a non-None subject and raise NullSubjectError otherwise;
be_null, be_null_or_empty, be_null_or_white_space, equality and membership
accept None as an ordinary value.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from guard_fluently import wildcard
from guard_fluently.checks import Guard
from guard_fluently.config import get_settings
from guard_fluently.constraints import AndConstraint
from guard_fluently.failure import GuardAssertionError
from guard_fluently.guard_failures import GuardFailures, describe, describe_all
from guard_fluently.primitives import reference
from guard_fluently.primitives.reference import unsupported_eq

_STR = "str"


def _normalize(text: str) -> str:
    return text.strip().lower()


def _equivalent(a: str | None, b: str | None) -> bool:
    if a is None or b is None:
        return a is b
    return _normalize(a) == _normalize(b)


def _flatten(values: tuple[Any, ...]) -> Iterable[Any]:
    """Accept both f("a", "b") and f(["a", "b"])."""
    if len(values) == 1 and values[0] is not None and not isinstance(values[0], str):
        return values[0]
    return values


@dataclass(frozen=True, slots=True, eq=False)
class StringGuards:
    """
    Checks that a str argument is in the expected state.

        should(user_name).not_be_null_or_white_space().and_.have_length_greater_than(3)
    """

    subject: str | None
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", get_settings().default_name)

    def _require_subject(self) -> str:
        Guard.is_not_null(self.subject, self.name, _STR)
        return self.subject  # type: ignore[return-value]

    def _fail(self, requirement: str, expected: Any = None) -> GuardAssertionError:
        return GuardFailures.assertion_failed(self.name, self.subject, requirement, expected)

    # ──────────────────────── Null / identity / type ────────────────────────

    def be_null(self) -> AndConstraint[StringGuards]:
        reference.be_null(self.subject, self.name)
        return AndConstraint(self)

    def not_be_null(self) -> AndConstraint[StringGuards]:
        reference.not_be_null(self.subject, self.name, _STR)
        return AndConstraint(self)

    def be_same_as(self, expected: str | None) -> AndConstraint[StringGuards]:
        reference.be_same_as(self.subject, expected, self.name)
        return AndConstraint(self)

    def not_be_same_as(self, unexpected: str | None) -> AndConstraint[StringGuards]:
        reference.not_be_same_as(self.subject, unexpected, self.name)
        return AndConstraint(self)

    def be_of_type(self, expected_type: type) -> AndConstraint[StringGuards]:
        reference.be_of_type(self.subject, expected_type, self.name)
        return AndConstraint(self)

    def not_be_of_type(self, unexpected_type: type) -> AndConstraint[StringGuards]:
        reference.not_be_of_type(self.subject, unexpected_type, self.name)
        return AndConstraint(self)

    def be_assignable_to(self, target_type: type) -> AndConstraint[StringGuards]:
        reference.be_assignable_to(self.subject, target_type, self.name)
        return AndConstraint(self)

    def not_be_assignable_to(self, target_type: type) -> AndConstraint[StringGuards]:
        reference.not_be_assignable_to(self.subject, target_type, self.name)
        return AndConstraint(self)

    # ──────────────────────── Equality ────────────────────────

    def be(self, expected: str | None) -> AndConstraint[StringGuards]:
        """Subject must be exactly expected, including casing and surrounding whitespace."""
        Guard.is_equal_to(self.subject, expected, self.name)
        return AndConstraint(self)

    def not_be(self, unexpected: str | None) -> AndConstraint[StringGuards]:
        """Subject must differ from unexpected in at least one character."""
        if self.subject == unexpected:
            raise self._fail(f"must not be {describe(unexpected)}.", unexpected)
        return AndConstraint(self)

    def be_equivalent_to(self, expected: str | None) -> AndConstraint[StringGuards]:
        """Subject must equal expected once both are stripped and lower-cased."""
        if not _equivalent(self.subject, expected):
            raise self._fail(f"must be equivalent to {describe(expected)}.", expected)
        return AndConstraint(self)

    def not_be_equivalent_to(self, unexpected: str | None) -> AndConstraint[StringGuards]:
        if _equivalent(self.subject, unexpected):
            raise self._fail(f"must not be equivalent to {describe(unexpected)}.", unexpected)
        return AndConstraint(self)

    def be_one_of(self, *valid_values: str | None | Iterable[str | None]) -> AndConstraint[StringGuards]:
        """
        Subject must be one of valid_values.

        Accepts the candidates as arguments or as a single iterable. None is a
        valid candidate, so should_str(None).be_one_of("a", None) passes.
        """
        reference.be_one_of(self.subject, _flatten(valid_values), self.name)
        return AndConstraint(self)

    def not_be_one_of(self, *invalid_values: str | None | Iterable[str | None]) -> AndConstraint[StringGuards]:
        reference.not_be_one_of(self.subject, _flatten(invalid_values), self.name)
        return AndConstraint(self)

    # ──────────────────────── Patterns ────────────────────────

    def match(self, wildcard_pattern: str | Callable[[str | None], bool]) -> AndConstraint[StringGuards]:
        """
        Subject must match a wildcard pattern, or satisfy a predicate.

        The pattern may combine literal text with * (any sequence) and ?
        (any single character) and must cover the whole subject. Regular
        expressions are not supported here; see match_regex().
        """
        if callable(wildcard_pattern):
            reference.match(self.subject, wildcard_pattern, self.name)
            return AndConstraint(self)
        if not wildcard.matches(self.subject, wildcard_pattern, self.name):
            raise self._fail("must match the given wildcard pattern.", wildcard_pattern)
        return AndConstraint(self)

    def not_match(self, wildcard_pattern: str | Callable[[str | None], bool]) -> AndConstraint[StringGuards]:
        """Inverse of match(): subject must not match the pattern or satisfy the predicate."""
        if callable(wildcard_pattern):
            reference.not_match(self.subject, wildcard_pattern, self.name)
            return AndConstraint(self)
        if wildcard.matches(self.subject, wildcard_pattern, self.name):
            raise self._fail("must not match the given wildcard pattern.", wildcard_pattern)
        return AndConstraint(self)

    def match_equivalent_of(self, wildcard_pattern: str) -> AndConstraint[StringGuards]:
        """match() after stripping and lower-casing subject and pattern."""
        if not wildcard.matches_equivalent(self.subject, wildcard_pattern, self.name):
            raise self._fail("must match the given wildcard pattern.", wildcard_pattern)
        return AndConstraint(self)

    def not_match_equivalent_of(self, wildcard_pattern: str) -> AndConstraint[StringGuards]:
        if wildcard.matches_equivalent(self.subject, wildcard_pattern, self.name):
            raise self._fail("must not match the given wildcard pattern.", wildcard_pattern)
        return AndConstraint(self)

    def match_regex(self, regular_expression: str | re.Pattern[str]) -> AndConstraint[StringGuards]:
        """Subject must contain a match for regular_expression (re.search semantics)."""
        regex = _compile(regular_expression)
        if regex.search(self._require_subject()) is None:
            raise self._fail("must match the given regular expression.", regex.pattern)
        return AndConstraint(self)

    def not_match_regex(self, regular_expression: str | re.Pattern[str]) -> AndConstraint[StringGuards]:
        regex = _compile(regular_expression)
        if regex.search(self._require_subject()) is not None:
            raise self._fail("must not match the given regular expression.", regex.pattern)
        return AndConstraint(self)

    # ──────────────────────── Start / end ────────────────────────

    def start_with(self, expected: str) -> AndConstraint[StringGuards]:
        _require_text(expected, "expected", "Cannot compare start of string with None.")
        if not self._require_subject().startswith(expected):
            raise self._fail(f"must contain a value that starts with {describe(expected)}.", expected)
        return AndConstraint(self)

    def not_start_with(self, unexpected: str) -> AndConstraint[StringGuards]:
        _require_text(unexpected, "unexpected", "Cannot compare start of string with None.")
        if self._require_subject().startswith(unexpected):
            raise self._fail(f"must contain a value that doesn't start with {describe(unexpected)}.", unexpected)
        return AndConstraint(self)

    def start_with_equivalent_of(self, expected: str) -> AndConstraint[StringGuards]:
        _require_text(expected, "expected", "Cannot compare start of string with None.")
        if not _normalize(self._require_subject()).startswith(_normalize(expected)):
            raise self._fail(f"must contain a value that starts with {describe(expected)}.", expected)
        return AndConstraint(self)

    def not_start_with_equivalent_of(self, unexpected: str) -> AndConstraint[StringGuards]:
        _require_text(unexpected, "unexpected", "Cannot compare start of string with None.")
        if _normalize(self._require_subject()).startswith(_normalize(unexpected)):
            raise self._fail(f"must contain a value that doesn't start with {describe(unexpected)}.", unexpected)
        return AndConstraint(self)

    def end_with(self, expected: str) -> AndConstraint[StringGuards]:
        _require_text(expected, "expected", "Cannot compare end of string with None.")
        if not self._require_subject().endswith(expected):
            raise self._fail(f"must contain a value that ends with {describe(expected)}.", expected)
        return AndConstraint(self)

    def not_end_with(self, unexpected: str) -> AndConstraint[StringGuards]:
        _require_text(unexpected, "unexpected", "Cannot compare end of string with None.")
        if self._require_subject().endswith(unexpected):
            raise self._fail(f"must contain a value that doesn't end with {describe(unexpected)}.", unexpected)
        return AndConstraint(self)

    def end_with_equivalent_of(self, expected: str) -> AndConstraint[StringGuards]:
        _require_text(expected, "expected", "Cannot compare end of string with None.")
        if not _normalize(self._require_subject()).endswith(_normalize(expected)):
            raise self._fail(f"must contain a value that ends with {describe(expected)}.", expected)
        return AndConstraint(self)

    def not_end_with_equivalent_of(self, unexpected: str) -> AndConstraint[StringGuards]:
        _require_text(unexpected, "unexpected", "Cannot compare end of string with None.")
        if _normalize(self._require_subject()).endswith(_normalize(unexpected)):
            raise self._fail(f"must contain a value that doesn't end with {describe(unexpected)}.", unexpected)
        return AndConstraint(self)

    # ──────────────────────── Containment ────────────────────────

    def contain(self, expected: str) -> AndConstraint[StringGuards]:
        """Subject must contain the fragment expected."""
        _require_text(expected, "expected", "Cannot assert string containment against None.")
        if expected not in self._require_subject():
            raise self._fail(f"must contain the string {describe(expected)}.", expected)
        return AndConstraint(self)

    def not_contain(self, unexpected: str) -> AndConstraint[StringGuards]:
        _require_text(unexpected, "unexpected", "Cannot assert string containment against None.")
        if unexpected in self._require_subject():
            raise self._fail(f"must not contain the string {describe(unexpected)}.", unexpected)
        return AndConstraint(self)

    def contain_equivalent_of(self, expected: str) -> AndConstraint[StringGuards]:
        _require_text(expected, "expected", "Cannot assert string containment against None.")
        if _normalize(expected) not in _normalize(self._require_subject()):
            raise self._fail(f"must contain an equivalent of the string {describe(expected)}.", expected)
        return AndConstraint(self)

    def not_contain_equivalent_of(self, unexpected: str) -> AndConstraint[StringGuards]:
        _require_text(unexpected, "unexpected", "Cannot assert string containment against None.")
        if _normalize(unexpected) in _normalize(self._require_subject()):
            raise self._fail(f"must not contain an equivalent value of {describe(unexpected)}.", unexpected)
        return AndConstraint(self)

    def contain_all(self, *values: str | Iterable[str]) -> AndConstraint[StringGuards]:
        """Subject must contain every one of values."""
        fragments = _require_fragments(values)
        subject = self._require_subject()
        if not all(fragment in subject for fragment in fragments):
            raise self._fail(f"must contain all following values [{describe_all(fragments)}].", fragments)
        return AndConstraint(self)

    def contain_any(self, *values: str | Iterable[str]) -> AndConstraint[StringGuards]:
        """Subject must contain at least one of values."""
        fragments = _require_fragments(values)
        subject = self._require_subject()
        if not any(fragment in subject for fragment in fragments):
            raise self._fail(f"must contain any of following values [{describe_all(fragments)}].", fragments)
        return AndConstraint(self)

    def not_contain_all(self, *values: str | Iterable[str]) -> AndConstraint[StringGuards]:
        """Subject may contain some of values, but not all of them."""
        fragments = _require_fragments(values)
        subject = self._require_subject()
        if all(fragment in subject for fragment in fragments):
            raise self._fail(f"must not contain all following values [{describe_all(fragments)}].", fragments)
        return AndConstraint(self)

    def not_contain_any(self, *values: str | Iterable[str]) -> AndConstraint[StringGuards]:
        """Subject must contain none of values."""
        fragments = _require_fragments(values)
        subject = self._require_subject()
        if any(fragment in subject for fragment in fragments):
            raise self._fail(f"must not contain any of following values [{describe_all(fragments)}].", fragments)
        return AndConstraint(self)

    # ──────────────────────── Emptiness ────────────────────────

    def be_empty(self) -> AndConstraint[StringGuards]:
        Guard.is_empty(self.subject, self.name)
        return AndConstraint(self)

    def not_be_empty(self) -> AndConstraint[StringGuards]:
        Guard.is_not_empty(self.subject, self.name)
        return AndConstraint(self)

    def be_null_or_empty(self) -> AndConstraint[StringGuards]:
        Guard.is_null_or_empty(self.subject, self.name)
        return AndConstraint(self)

    def not_be_null_or_empty(self) -> AndConstraint[StringGuards]:
        """Raises NullSubjectError for None and GuardAssertionError for ""."""
        Guard.is_not_null_or_empty(self.subject, self.name)
        return AndConstraint(self)

    def be_null_or_white_space(self) -> AndConstraint[StringGuards]:
        Guard.is_null_or_white_space(self.subject, self.name)
        return AndConstraint(self)

    def not_be_null_or_white_space(self) -> AndConstraint[StringGuards]:
        """Raises NullSubjectError for None and GuardAssertionError for blank strings."""
        Guard.is_not_null_or_white_space(self.subject, self.name)
        return AndConstraint(self)

    # ──────────────────────── Casing ────────────────────────
    # Every character must pass str.isupper()/islower(). Digits and
    # punctuation have no casing, so "ABC1" is neither upper- nor
    # lower-cased, while "" is both.

    def be_upper_cased(self) -> AndConstraint[StringGuards]:
        """All characters must be upper case. Use not_be_lower_cased() for mixed content."""
        if not all(c.isupper() for c in self._require_subject()):
            raise self._fail("must have only uppercased chars.")
        return AndConstraint(self)

    def not_be_upper_cased(self) -> AndConstraint[StringGuards]:
        if all(c.isupper() for c in self._require_subject()):
            raise self._fail("must not have only uppercased chars.")
        return AndConstraint(self)

    def be_lower_cased(self) -> AndConstraint[StringGuards]:
        """All characters must be lower case. Use not_be_upper_cased() for mixed content."""
        if not all(c.islower() for c in self._require_subject()):
            raise self._fail("must have only lowercased chars.")
        return AndConstraint(self)

    def not_be_lower_cased(self) -> AndConstraint[StringGuards]:
        if all(c.islower() for c in self._require_subject()):
            raise self._fail("must not have only lowercased chars.")
        return AndConstraint(self)

    # ──────────────────────── Length ────────────────────────

    def have_length(self, expected: int) -> AndConstraint[StringGuards]:
        Guard.has_size_equal_to(self._require_subject(), expected, self.name)
        return AndConstraint(self)

    def have_length_less_than(self, expected: int) -> AndConstraint[StringGuards]:
        Guard.has_size_less_than(self._require_subject(), expected, self.name)
        return AndConstraint(self)

    def have_length_less_than_or_equal_to(self, expected: int) -> AndConstraint[StringGuards]:
        Guard.has_size_less_than_or_equal_to(self._require_subject(), expected, self.name)
        return AndConstraint(self)

    def have_length_greater_than(self, expected: int) -> AndConstraint[StringGuards]:
        Guard.has_size_greater_than(self._require_subject(), expected, self.name)
        return AndConstraint(self)

    def have_length_greater_than_or_equal_to(self, expected: int) -> AndConstraint[StringGuards]:
        Guard.has_size_greater_than_or_equal_to(self._require_subject(), expected, self.name)
        return AndConstraint(self)

    __eq__ = unsupported_eq
    __hash__ = object.__hash__


def _require_text(value: str | None, argument: str, message: str) -> str:
    if value is None:
        raise GuardFailures.argument_error(argument, message)
    return value


def _require_fragments(values: tuple[Any, ...]) -> list[str]:
    message = "Cannot assert string containment against None or empty."
    fragments = reference.require_values(_flatten(values), "values", message)
    if any(fragment is None for fragment in fragments):
        raise GuardFailures.argument_error("values", message)
    return fragments


def _compile(regular_expression: str | re.Pattern[str] | None) -> re.Pattern[str]:
    """Validate and compile a regex argument; invalid input is an argument-contract violation."""
    if regular_expression is None:
        raise GuardFailures.argument_error(
            "regular_expression",
            "Cannot match string against None. Provide a regex expression or use the not_be_null method.",
        )
    pattern = (
        regular_expression.pattern
        if isinstance(regular_expression, re.Pattern)
        else regular_expression
    )
    if len(pattern) == 0:
        raise GuardFailures.argument_error(
            "regular_expression",
            "Cannot match string against an empty string. Provide a expression pattern or use the not_be_empty method.",
        )
    if isinstance(regular_expression, re.Pattern):
        return regular_expression
    try:
        return re.compile(regular_expression)
    except re.error as e:
        raise GuardFailures.argument_error(
            "regular_expression", f"Invalid regular expression {regular_expression!r}: {e}"
        ) from e
