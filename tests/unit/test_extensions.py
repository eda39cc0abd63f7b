"""
Unit tests for the should() entry points.

Verifies dispatch on the runtime type of the subject and the typed
variants used for values that may be None.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from guard_fluently import (
    BooleanGuards,
    GuardSettings,
    ObjectGuards,
    StringGuards,
    should,
    should_bool,
    should_object,
    should_str,
)


class TestShouldDispatch:
    """Verify should() picks the wrapper from the subject type."""

    @pytest.mark.parametrize(
        ("subject", "expected_type"),
        [
            (True, BooleanGuards),
            (False, BooleanGuards),
            ("text", StringGuards),
            ("", StringGuards),
            (7, ObjectGuards),
            (7.5, ObjectGuards),
            ([1, 2], ObjectGuards),
            (None, ObjectGuards),
        ],
    )
    def test_wrapper_type(self, subject: object, expected_type: type) -> None:
        assert type(should(subject)) is expected_type

    def test_str_subclass_gets_string_guards(self) -> None:
        class Code(str):
            pass

        assert isinstance(should(Code("A")), StringGuards)

    def test_subject_is_kept(self) -> None:
        value = object()
        assert should(value).subject is value


class TestNames:
    """Verify diagnostic names."""

    def test_explicit_name(self) -> None:
        assert should("A", "country").name == "country"
        assert should(True, "flag").name == "flag"
        assert should(1, "count").name == "count"

    def test_default_name(self) -> None:
        assert should("A").name == "value"

    def test_default_name_from_settings(self, configure_env: Callable[..., GuardSettings]) -> None:
        """
        GIVEN GUARD_FLUENTLY_DEFAULT_NAME=argument
        WHEN should() is called without a name
        THEN the wrapper uses the configured name.
        """
        configure_env(default_name="argument")
        assert should("A").name == "argument"
        assert should_str(None).name == "argument"


class TestTypedEntryPoints:
    """Verify should_bool / should_str / should_object."""

    def test_should_str_keeps_none_as_string_subject(self) -> None:
        guard = should_str(None, "user_name")
        assert isinstance(guard, StringGuards)
        assert guard.subject is None

    def test_should_bool(self) -> None:
        assert isinstance(should_bool(None), BooleanGuards)

    def test_should_object(self) -> None:
        assert isinstance(should_object("A"), ObjectGuards)
