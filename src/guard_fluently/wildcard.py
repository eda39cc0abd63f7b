"""
Wildcard matching: glob-style patterns translated to anchored regexes.

    *   any sequence of characters (including none)
    ?   exactly one character

Everything else in the pattern is literal:

    >>> wildcard_to_regex("?b*.txt")
    '^.b.*\\\\.txt$'
    >>> matches("Abmachen", "?b*")
    True
    >>> matches("A", "??")
    False
"""

from __future__ import annotations

import re

from guard_fluently.checks import Guard
from guard_fluently.guard_failures import GuardFailures


def wildcard_to_regex(pattern: str) -> str:
    """Escape every regex metacharacter, then turn the escaped ? and * back into wildcards."""
    return "^" + re.escape(pattern).replace(r"\?", ".").replace(r"\*", ".*") + "$"


def validate_pattern(pattern: str | None, argument: str = "wildcard_pattern") -> str:
    """Reject None, non-str and empty patterns as argument-contract violations."""
    if pattern is None:
        raise GuardFailures.argument_error(
            argument,
            "Cannot match string against None. Provide a wildcard pattern or use the not_be_null method.",
        )
    if not isinstance(pattern, str):
        raise GuardFailures.argument_error(
            argument,
            f"Wildcard pattern must be a str, got {type(pattern).__name__}. Use match_regex for regular expressions.",
        )
    if len(pattern) == 0:
        raise GuardFailures.argument_error(
            argument,
            "Cannot match string against an empty string. Provide a wildcard pattern or use the not_be_empty method.",
        )
    return pattern


def matches(subject: str | None, pattern: str | None, name: str = "subject") -> bool:
    """Whole-string wildcard match, case and whitespace sensitive."""
    pattern = validate_pattern(pattern)
    Guard.is_not_null(subject, name, "str")
    return _fullmatch(subject, pattern)  # type: ignore[arg-type]


def matches_equivalent(subject: str | None, pattern: str | None, name: str = "subject") -> bool:
    """Like matches(), after lower-casing and stripping both subject and pattern."""
    pattern = validate_pattern(pattern)
    Guard.is_not_null(subject, name, "str")
    return _fullmatch(subject.lower().strip(), pattern.lower().strip())  # type: ignore[union-attr]


def _fullmatch(subject: str, pattern: str) -> bool:
    return re.fullmatch(wildcard_to_regex(pattern), subject) is not None
