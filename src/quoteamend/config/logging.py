"""Logging setup for command-line entry points."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError

LOG_LEVEL_ENV = "QUOTEAMEND_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Level named by ``QUOTEAMEND_LOG_LEVEL``, or ``default`` when unset."""

    raw = os.getenv(LOG_LEVEL_ENV)
    if raw is None or not raw.strip():
        return default
    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV}: {raw!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Configure the root logger for CLI output.

    Without an explicit ``level`` the environment decides, falling back to INFO.
    httpx request lines are kept at WARNING unless DEBUG is requested.
    """

    effective = resolve_log_level() if level is None else level
    logging.basicConfig(
        level=effective,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if effective > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
