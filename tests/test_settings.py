"""Typed smoke tests for the settings loader.

These tests verify three guarantees:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Iterator
from typing import Any

import pytest
from pydantic import ValidationError

from chronos_md.core.settings import (
    Settings,
    get_logger,
    load_settings,
    settings,
)


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_settings_instance_type() -> None:
    """`settings` should be an instance of the typed `Settings` model."""
    assert isinstance(settings, Settings)


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("CHRONOS_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CHRONOS_LOCALE", "de")
    monkeypatch.setenv("CHRONOS_MAX_ERRORS", "5")

    s = load_settings()

    assert s.environment == "test" and s.is_test
    assert s.log_level == "DEBUG"
    assert s.default_locale == "de"
    assert s.max_errors_shown == 5


def test_unknown_locale_is_left_to_the_cli(monkeypatch: Any) -> None:
    """A bad CHRONOS_LOCALE loads; only the CLI turns it into ParseOptions."""
    monkeypatch.setenv("CHRONOS_LOCALE", "fr_FR")
    assert load_settings().default_locale == "fr_FR"
    assert get_logger("chronos_md.tests.locale").handlers


def test_library_imports_with_bad_locale_env() -> None:
    """`import chronos_md` and `parse()` must not depend on CLI settings."""
    code = (
        "import chronos_md; "
        "r = chronos_md.parse('- [2020] ok'); "
        "assert len(r.items) == 1, r"
    )
    env = {**os.environ, "CHRONOS_LOCALE": "fr_FR"}
    proc = subprocess.run(
        [sys.executable, "-c", code], env=env, capture_output=True, text=True, check=False
    )
    assert proc.returncode == 0, proc.stderr


def test_max_errors_must_be_positive(monkeypatch: Any) -> None:
    monkeypatch.setenv("CHRONOS_MAX_ERRORS", "0")
    with pytest.raises(ValidationError):
        load_settings()


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` should apply the numeric level derived from `LOG_LEVEL`.

    A unique logger name avoids side effects between tests.
    """
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    logger = get_logger("chronos_md.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."
    assert logger.propagate is False
