"""Tests for SQLAlchemy quote and quote-line repositories."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.orm import Session  # noqa: TC002

from quoteamend.adapters.sqlalchemy.repositories import (
    SqlAlchemyQuoteLineRepository,
    SqlAlchemyQuoteRepository,
)
from quoteamend.domain.model import Quote
from tests.helpers.quote_lines import make_quote_line


def _add_quote(session: Session, quote_id: str = "q1") -> None:
    SqlAlchemyQuoteRepository(session).add(Quote(id=quote_id, name=f"Quote {quote_id}"))


def test_quote_repository_round_trip(sqlite_session: Session) -> None:
    repository = SqlAlchemyQuoteRepository(sqlite_session)
    repository.add(Quote(id="q1", name="Q-00001", fulfillment_frequency="Monthly"))
    sqlite_session.commit()

    loaded = repository.get("q1")

    assert loaded is not None
    assert loaded.fulfillment_frequency == "Monthly"
    assert repository.get("missing") is None


def test_quote_line_repository_round_trips_decimal_values(sqlite_session: Session) -> None:
    _add_quote(sqlite_session)
    repository = SqlAlchemyQuoteLineRepository(sqlite_session)
    repository.add(make_quote_line("a1", quantity="2.5", net_price="19.99"))
    sqlite_session.commit()
    sqlite_session.expire_all()

    loaded = repository.get("a1")

    assert loaded is not None
    assert loaded.quantity == Decimal("2.5")
    assert loaded.net_price == Decimal("19.99")
    assert isinstance(loaded.quantity, Decimal)


def test_list_for_quote_orders_by_line_number(sqlite_session: Session) -> None:
    _add_quote(sqlite_session)
    _add_quote(sqlite_session, "q2")
    repository = SqlAlchemyQuoteLineRepository(sqlite_session)
    repository.add(make_quote_line("x", name="QL-0002"))
    repository.add(make_quote_line("y", name="QL-0001"))
    repository.add(make_quote_line("z", quote_id="q2", name="QL-0001"))
    sqlite_session.commit()

    lines = repository.list_for_quote("q1")

    assert [line.id for line in lines] == ["y", "x"]


def test_next_line_name_continues_after_highest_number(sqlite_session: Session) -> None:
    _add_quote(sqlite_session)
    repository = SqlAlchemyQuoteLineRepository(sqlite_session)

    assert repository.next_line_name("q1") == "QL-0001"

    repository.add(make_quote_line("a", name="QL-0001"))
    repository.add(make_quote_line("b", name="QL-0007"))
    repository.add(make_quote_line("c", name="Custom"))
    sqlite_session.commit()

    assert repository.next_line_name("q1") == "QL-0008"


def test_remove_deletes_line(sqlite_session: Session) -> None:
    _add_quote(sqlite_session)
    repository = SqlAlchemyQuoteLineRepository(sqlite_session)
    line = make_quote_line("a1")
    repository.add(line)
    sqlite_session.commit()

    repository.remove(line)
    sqlite_session.commit()

    assert repository.get("a1") is None
