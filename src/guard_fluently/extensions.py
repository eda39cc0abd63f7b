"""
Entry points that wrap a value in the guard matching its runtime type.

    should(True)         -> BooleanGuards
    should("text")       -> StringGuards
    should(anything)     -> ObjectGuards (None included)

A None value carries no type, so should(None) always yields ObjectGuards.
When the declared kind of a possibly-None value is known, use the typed
entry points instead:

    should_str(request.user_name, "user_name").not_be_null_or_white_space()
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, TypeVar

from guard_fluently.primitives.boolean import BooleanGuards
from guard_fluently.primitives.objects import ObjectGuards
from guard_fluently.primitives.strings import StringGuards

T = TypeVar("T")


@singledispatch
def should(subject: Any, name: str | None = None) -> Any:
    """Return the guard wrapper for subject; name labels it in failure messages."""
    return ObjectGuards(subject, name or "")


@should.register
def _(subject: bool, name: str | None = None) -> BooleanGuards:
    return BooleanGuards(subject, name or "")


@should.register
def _(subject: str, name: str | None = None) -> StringGuards:
    return StringGuards(subject, name or "")


def should_bool(subject: bool | None, name: str | None = None) -> BooleanGuards:
    return BooleanGuards(subject, name or "")


def should_str(subject: str | None, name: str | None = None) -> StringGuards:
    return StringGuards(subject, name or "")


def should_object(subject: T | None, name: str | None = None) -> ObjectGuards[T]:
    return ObjectGuards(subject, name or "")
