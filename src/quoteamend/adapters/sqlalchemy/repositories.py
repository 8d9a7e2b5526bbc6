"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from quoteamend.adapters.sqlalchemy.mappings import quote_line_table
from quoteamend.domain.model import Quote, QuoteLine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.orm import Session

    from quoteamend.domain.model import LineId

LINE_NAME_PREFIX = "QL-"


class SqlAlchemyQuoteRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Quote) -> None:
        self.session.add(entity)

    def get(self, quote_id: str) -> Quote | None:
        return self.session.get(Quote, quote_id)


class SqlAlchemyQuoteLineRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: QuoteLine) -> None:
        self.session.add(entity)

    def get(self, line_id: LineId) -> QuoteLine | None:
        return self.session.get(QuoteLine, line_id)

    def list_for_quote(self, quote_id: str) -> Sequence[QuoteLine]:
        stmt = (
            select(QuoteLine)
            .where(quote_line_table.c.quote_id == quote_id)
            .order_by(quote_line_table.c.name, quote_line_table.c.id)
        )
        return self.session.execute(stmt).scalars().all()

    def next_line_name(self, quote_id: str) -> str:
        """Return the next sequential line number for ``quote_id`` (``QL-0001`` style)."""

        stmt = (
            select(quote_line_table.c.name)
            .where(quote_line_table.c.quote_id == quote_id)
            .where(quote_line_table.c.name.like(f"{LINE_NAME_PREFIX}%"))
        )
        highest = 0
        for name in self.session.execute(stmt).scalars():
            suffix = name.removeprefix(LINE_NAME_PREFIX)
            if suffix.isdigit():
                highest = max(highest, int(suffix))
        return f"{LINE_NAME_PREFIX}{highest + 1:04d}"

    def remove(self, entity: QuoteLine) -> None:
        self.session.delete(entity)


if TYPE_CHECKING:
    from quoteamend.domain.ports.persistence import QuoteLineRepository, QuoteRepository

    _session_stub = cast("Session", object())
    _quote_repo: QuoteRepository = SqlAlchemyQuoteRepository(_session_stub)
    _line_repo: QuoteLineRepository = SqlAlchemyQuoteLineRepository(_session_stub)
