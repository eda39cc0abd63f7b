"""Fluent guard wrappers, one per subject kind."""

from guard_fluently.primitives.boolean import BooleanGuards
from guard_fluently.primitives.objects import ObjectGuards
from guard_fluently.primitives.strings import StringGuards

__all__ = ["BooleanGuards", "ObjectGuards", "StringGuards"]
