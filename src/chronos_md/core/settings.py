"""Centralized application configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod

The parsing engine itself never reads these values; only the CLI does, so that
`parse()` stays a pure function of its arguments.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `CHRONOS_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    default_locale : str
        Locale used by the CLI when `--locale` is not given; maps from
        `CHRONOS_LOCALE`. Checked against the locale registry by the CLI when
        it builds `ParseOptions`, so a bad value never breaks `import`.
    max_errors_shown : int
        Upper bound on diagnostics rendered by the CLI tables; maps from
        `CHRONOS_MAX_ERRORS`.
    """

    environment: EnvName = Field(default="dev", alias="CHRONOS_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    default_locale: str = Field(default="en", alias="CHRONOS_LOCALE")
    max_errors_shown: int = Field(default=50, ge=1, alias="CHRONOS_MAX_ERRORS")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        """Return True if running in the development environment."""
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    We keep this behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    os.environ.setdefault("CHRONOS_ENV", "dev")
    return Settings()


# Export a ready-to-use singleton (import-time read of env / .env files).
settings: Settings = load_settings()


def get_logger(name: str = "chronos_md") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
