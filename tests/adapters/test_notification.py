from __future__ import annotations

import logging

import pytest

from quoteamend.adapters.notification import LoggingNotifier
from quoteamend.domain.model import Severity


@pytest.mark.parametrize(
    ("severity", "level"),
    [
        (Severity.SUCCESS, logging.INFO),
        (Severity.WARNING, logging.WARNING),
        (Severity.ERROR, logging.ERROR),
    ],
)
def test_logging_notifier_maps_severity_to_level(
    caplog: pytest.LogCaptureFixture,
    severity: Severity,
    level: int,
) -> None:
    caplog.set_level(logging.INFO, logger="quoteamend.notify")

    LoggingNotifier().notify(severity, "Quote lines saved.")

    [record] = caplog.records
    assert record.levelno == level
    assert record.getMessage() == "Quote lines saved."
