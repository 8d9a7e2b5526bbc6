"""Domain-level error types."""

from __future__ import annotations


class QuoteAmendError(RuntimeError):
    """Base class for errors raised by quote amendment collaborators."""


class GatewayError(QuoteAmendError):
    """Raised when a persistence collaborator rejects an operation."""

    def __init__(self, message: str, *, operation: str, line_id: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.line_id = line_id
