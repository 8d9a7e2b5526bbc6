"""Notifier that reports operator messages through the standard logger."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from quoteamend.domain.model import Severity

_LEVELS: dict[Severity, int] = {
    Severity.SUCCESS: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


@dataclass(slots=True)
class LoggingNotifier:
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("quoteamend.notify"))

    def notify(self, severity: Severity, message: str) -> None:
        self.logger.log(_LEVELS[severity], message)
