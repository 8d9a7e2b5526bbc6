"""Port for user-facing notifications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from quoteamend.domain.model import Severity


@runtime_checkable
class Notifier(Protocol):
    """Surface a short message to the operator."""

    def notify(self, severity: Severity, message: str) -> None: ...
