"""Ports for reading and writing quote-line records held by the platform."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from quoteamend.domain.model import LineId, Quote, QuoteLine
    from quoteamend.domain.reconciliation import AmendmentRecord, QuantityUpdate


@runtime_checkable
class QuoteLineSource(Protocol):
    """Read-only access to the authoritative quote-line set of a quote."""

    async def fetch_quote(self, quote_id: str) -> Quote | None: ...

    async def fetch_quote_lines(self, quote_id: str) -> Sequence[QuoteLine]: ...


@runtime_checkable
class QuoteLineGateway(Protocol):
    """Remote persistence operations, one call per record.

    Each method raises ``GatewayError`` when the collaborator rejects the call.
    """

    async def update_quote_line(self, update: QuantityUpdate) -> None: ...

    async def insert_quote_line(self, record: AmendmentRecord) -> LineId: ...

    async def delete_quote_line(self, line_id: LineId) -> None: ...


@runtime_checkable
class RefreshSignal(Protocol):
    """Callback receiving the re-fetched quote lines after a successful batch."""

    def __call__(self, lines: Sequence[QuoteLine]) -> None: ...


__all__ = ["QuoteLineGateway", "QuoteLineSource", "RefreshSignal"]
