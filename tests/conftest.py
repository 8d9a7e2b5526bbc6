from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from quoteamend.adapters.sqlalchemy import start_mappers
from quoteamend.adapters.sqlalchemy.migrations import upgrade_head
from quoteamend.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyQuoteLineUnitOfWork,
    shutdown,
    startup,
)
from quoteamend.domain.model import Quote
from tests.helpers.quote_lines import make_quote_line

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    upgrade_head(engine=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyQuoteLineUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyQuoteLineUnitOfWork:
        return SqlAlchemyQuoteLineUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def seeded_unit_of_work(
    sqlite_unit_of_work: Callable[[], SqlAlchemyQuoteLineUnitOfWork],
) -> Callable[[], SqlAlchemyQuoteLineUnitOfWork]:
    """Unit-of-work factory over a quote ``q1`` with lines ``a1`` (2 x 100) and ``b1`` (1 x 50)."""

    with sqlite_unit_of_work() as uow:
        uow.repositories.quotes.add(Quote(id="q1", name="Q-00001"))
        uow.repositories.quote_lines.add(
            make_quote_line("a1", name="QL-0001", order_account_name="Acme")
        )
        uow.repositories.quote_lines.add(
            make_quote_line(
                "b1",
                quantity=1,
                net_price=50,
                product_id="p2",
                product_code="SKU-2",
                name="QL-0002",
            )
        )
        uow.commit()
    return sqlite_unit_of_work
