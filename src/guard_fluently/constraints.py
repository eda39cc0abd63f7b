"""Chain token returned by every successful guard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

G = TypeVar("G")


@dataclass(frozen=True, slots=True)
class AndConstraint(Generic[G]):
    """
    Wraps the guard a check was made on so further checks can be appended.

        should(name).not_be_null_or_white_space().and_.have_length_greater_than(10)

    `and` is a keyword, hence the trailing underscore.
    """

    and_: G
