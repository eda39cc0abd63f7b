"""
Shared test fixtures for the guard_fluently test suite.

Settings are cached process-wide; every test starts and ends with a fresh
cache so environment patches made through monkeypatch never leak. structlog is
returned to its defaults after each test for the same reason.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
import structlog

from guard_fluently.config import GuardSettings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _unconfigured_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture()
def configure_env(monkeypatch: pytest.MonkeyPatch) -> Callable[..., GuardSettings]:
    """
    Set GUARD_FLUENTLY_* variables and return the settings they produce.

        settings = configure_env(default_name="argument")
    """

    def _configure(**values: object) -> GuardSettings:
        for key, value in values.items():
            monkeypatch.setenv(f"GUARD_FLUENTLY_{key.upper()}", str(value))
        reset_settings()
        return get_settings()

    return _configure
