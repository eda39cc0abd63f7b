"""
Unit tests for the Guard primitive checks.

Each check either returns None or raises the matching guard error.
"""

from __future__ import annotations

import pytest

from guard_fluently import Guard, GuardAssertionError, NullSubjectError


class TestNullChecks:
    """Verify is_null / is_not_null."""

    def test_is_null_accepts_none(self) -> None:
        Guard.is_null(None, "x")

    def test_is_null_rejects_value(self) -> None:
        with pytest.raises(GuardAssertionError, match="must be None, was 'A'"):
            Guard.is_null("A", "x")

    def test_is_not_null_raises_null_subject_error(self) -> None:
        """
        GIVEN a None value
        WHEN is_not_null is called with a type name
        THEN NullSubjectError names the parameter and type.
        """
        with pytest.raises(NullSubjectError, match=r'Parameter "code" \(str\) must be not None'):
            Guard.is_not_null(None, "code", "str")

    def test_is_not_null_accepts_falsy_values(self) -> None:
        for value in ("", 0, False, []):
            Guard.is_not_null(value, "x")


class TestEqualityChecks:
    """Verify equality and identity checks."""

    def test_is_equal_to(self) -> None:
        Guard.is_equal_to(3, 3, "x")
        with pytest.raises(GuardAssertionError, match="must be equal to 4, was 3"):
            Guard.is_equal_to(3, 4, "x")

    def test_is_not_equal_to(self) -> None:
        Guard.is_not_equal_to(3, 4, "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_not_equal_to(3, 3, "x")

    def test_reference_equality_uses_identity(self) -> None:
        """
        GIVEN two equal but distinct lists
        WHEN compared by reference
        THEN only the same object passes is_reference_equal_to.
        """
        a, b = [1], [1]
        Guard.is_reference_equal_to(a, a, "x")
        Guard.is_reference_not_equal_to(a, b, "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_reference_equal_to(a, b, "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_reference_not_equal_to(a, a, "x")


class TestTypeChecks:
    """Verify exact-type and assignability checks."""

    def test_is_of_type_is_exact(self) -> None:
        Guard.is_of_type(True, bool, "x")
        with pytest.raises(GuardAssertionError, match="must be of type int"):
            Guard.is_of_type(True, int, "x")

    def test_is_not_of_type(self) -> None:
        Guard.is_not_of_type(True, int, "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_not_of_type(1, int, "x")

    def test_is_assignable_to_type_accepts_subclasses(self) -> None:
        Guard.is_assignable_to_type(True, int, "x")
        with pytest.raises(GuardAssertionError, match="must be assignable to type int"):
            Guard.is_assignable_to_type(7.5, int, "x")

    def test_is_not_assignable_to_type(self) -> None:
        Guard.is_not_assignable_to_type(7.5, int, "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_not_assignable_to_type(True, int, "x")


class TestBooleanChecks:
    """Verify is_true / is_false and their optional message."""

    def test_is_true(self) -> None:
        Guard.is_true(True, "flag")
        with pytest.raises(GuardAssertionError, match="must be True, was False. account locked"):
            Guard.is_true(False, "flag", "account locked")

    def test_is_false(self) -> None:
        Guard.is_false(False, "flag")
        with pytest.raises(GuardAssertionError, match=r"must be False, was True\.$"):
            Guard.is_false(True, "flag")


class TestStringChecks:
    """Verify emptiness and whitespace checks."""

    def test_is_empty(self) -> None:
        Guard.is_empty("", "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_empty("Hallo", "x")
        with pytest.raises(NullSubjectError):
            Guard.is_empty(None, "x")

    def test_is_not_empty(self) -> None:
        Guard.is_not_empty("Hallo", "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_not_empty("", "x")

    def test_is_null_or_empty(self) -> None:
        Guard.is_null_or_empty(None, "x")
        Guard.is_null_or_empty("", "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_null_or_empty(" ", "x")

    def test_is_not_null_or_empty_distinguishes_none_from_empty(self) -> None:
        """
        GIVEN None and ""
        WHEN is_not_null_or_empty is called
        THEN None raises NullSubjectError and "" a plain GuardAssertionError.
        """
        with pytest.raises(NullSubjectError):
            Guard.is_not_null_or_empty(None, "x")
        with pytest.raises(GuardAssertionError) as exc_info:
            Guard.is_not_null_or_empty("", "x")
        assert not isinstance(exc_info.value, NullSubjectError)

    def test_is_null_or_white_space(self) -> None:
        for text in (None, "", "   ", "\t\n"):
            Guard.is_null_or_white_space(text, "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_null_or_white_space("M ", "x")

    def test_is_not_null_or_white_space(self) -> None:
        Guard.is_not_null_or_white_space("M  ", "x")
        with pytest.raises(NullSubjectError):
            Guard.is_not_null_or_white_space(None, "x")
        with pytest.raises(GuardAssertionError):
            Guard.is_not_null_or_white_space("  ", "x")


class TestSizeChecks:
    """Verify the five size comparisons against len()."""

    def test_has_size_equal_to(self) -> None:
        Guard.has_size_equal_to("Mabrouk", 7, "x")
        with pytest.raises(GuardAssertionError, match="must have a size equal to 10, had a size of 7"):
            Guard.has_size_equal_to("Mabrouk", 10, "x")

    def test_has_size_less_than(self) -> None:
        Guard.has_size_less_than([1, 2], 3, "x")
        with pytest.raises(GuardAssertionError):
            Guard.has_size_less_than([1, 2, 3], 3, "x")

    def test_has_size_less_than_or_equal_to(self) -> None:
        Guard.has_size_less_than_or_equal_to("abc", 3, "x")
        with pytest.raises(GuardAssertionError):
            Guard.has_size_less_than_or_equal_to("abcd", 3, "x")

    def test_has_size_greater_than(self) -> None:
        Guard.has_size_greater_than("abcd", 3, "x")
        with pytest.raises(GuardAssertionError):
            Guard.has_size_greater_than("abc", 3, "x")

    def test_has_size_greater_than_or_equal_to(self) -> None:
        Guard.has_size_greater_than_or_equal_to("abc", 3, "x")
        with pytest.raises(GuardAssertionError):
            Guard.has_size_greater_than_or_equal_to("ab", 3, "x")
