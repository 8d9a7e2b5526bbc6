"""Ports for persisting quotes and quote lines in a local store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from quoteamend.domain.model import Quote, QuoteLine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from quoteamend.domain.model import LineId


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class QuoteRepository(Repository[Quote], Protocol):
    """Persistence contract for quote headers."""

    def get(self, quote_id: str) -> Quote | None: ...


@runtime_checkable
class QuoteLineRepository(Repository[QuoteLine], Protocol):
    """Persistence contract for quote lines."""

    def get(self, line_id: LineId) -> QuoteLine | None: ...

    def list_for_quote(self, quote_id: str) -> Sequence[QuoteLine]: ...

    def next_line_name(self, quote_id: str) -> str: ...

    def remove(self, entity: QuoteLine) -> None: ...
