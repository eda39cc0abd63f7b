"""
Optional structlog setup for hosts and samples using guard_fluently.

The library only ever calls structlog.get_logger(), and only when
GUARD_FLUENTLY_LOG_FAILURES is on. Hosts that already configure structlog
need nothing from here; scripts that don't can call:

    configure_structlog()            # level from GUARD_FLUENTLY_LOG_LEVEL
    configure_structlog("DEBUG")

Output goes to stderr so it never mixes with a script's own stdout.
"""

from __future__ import annotations

import logging
import sys

import structlog

from guard_fluently.config import get_settings


def configure_structlog(log_level: str | None = None) -> None:
    """
    Route structlog to stderr as plain key=value console lines.

    log_level defaults to GuardSettings.log_level; unknown names fall back to
    WARNING. Loggers are not cached, so a later call takes effect for
    module-level loggers created before it.
    """
    level_name = (log_level or get_settings().log_level).strip().upper()
    level = logging.getLevelNamesMapping().get(level_name, logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
