"""
Sample service guarding its inputs with guard_fluently.

Runs three calls against SomeService.do_some_call and logs whether each one
got through the guards:

    python examples/some_service.py
    GUARD_FLUENTLY_LOG_LEVEL=DEBUG python examples/some_service.py
    GUARD_FLUENTLY_LOG_LEVEL=DEBUG GUARD_FLUENTLY_LOG_FAILURES=true python examples/some_service.py

The last form also shows the guard.failed debug event behind each rejection.
"""

from __future__ import annotations

from typing import Any

import structlog

from guard_fluently import GuardError, should, should_str
from guard_fluently.log_config import configure_structlog

SAMPLE_CALLS: tuple[tuple[str, Any], ...] = (
    ("A", 7),
    ("My size is over that 10", 7.5),
    ("My size is over that 10", 7),
)


class SomeService:
    """Service whose single operation requires a long name and an int length."""

    def do_some_call(self, name: str, length: Any) -> None:
        should_str(name, "name").not_be_null_or_white_space().and_.have_length_greater_than(10)
        should(length, "length").be_assignable_to(int)


def main() -> int:
    """Run every sample call, log its outcome and return how many were rejected."""
    configure_structlog()
    log = structlog.get_logger()

    service = SomeService()
    rejected = 0
    for name, length in SAMPLE_CALLS:
        try:
            service.do_some_call(name, length)
        except GuardError as e:
            rejected += 1
            log.warning("sample.rejected", code=e.failure.code.value, error=str(e))
            continue
        log.info("sample.accepted", name=name, length=length)

    log.info("sample.done", calls=len(SAMPLE_CALLS), rejected=rejected)
    return rejected


if __name__ == "__main__":
    main()
