"""Quote-line source and gateway ports implemented on the local SQLAlchemy store.

Every gateway call runs in its own unit of work and commits on its own, the same
way independent remote calls would: a failing call never rolls back the others.
The methods are coroutines only to satisfy the ports; the session work inside
them blocks, so a gathered batch against this store runs one call at a time.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from quoteamend.adapters.sqlalchemy.unit_of_work import SqlAlchemyQuoteLineUnitOfWork
from quoteamend.domain.errors import GatewayError
from quoteamend.domain.model import new_line_id
from quoteamend.domain.ports.unit_of_work import QuoteLineUnitOfWork

if TYPE_CHECKING:
    from quoteamend.domain.model import LineId, Quote, QuoteLine
    from quoteamend.domain.reconciliation import AmendmentRecord, QuantityUpdate

UnitOfWorkFactory = Callable[[], QuoteLineUnitOfWork]

log = getLogger(__name__)


@dataclass(slots=True)
class SqlAlchemyQuoteLineSource:
    unit_of_work_factory: UnitOfWorkFactory = SqlAlchemyQuoteLineUnitOfWork

    async def fetch_quote(self, quote_id: str) -> Quote | None:
        with self.unit_of_work_factory() as uow:
            return uow.repositories.quotes.get(quote_id)

    async def fetch_quote_lines(self, quote_id: str) -> list[QuoteLine]:
        with self.unit_of_work_factory() as uow:
            return list(uow.repositories.quote_lines.list_for_quote(quote_id))


@dataclass(slots=True)
class SqlAlchemyQuoteLineGateway:
    unit_of_work_factory: UnitOfWorkFactory = SqlAlchemyQuoteLineUnitOfWork

    async def update_quote_line(self, update: QuantityUpdate) -> None:
        with self.unit_of_work_factory() as uow:
            line = uow.repositories.quote_lines.get(update.id)
            if line is None:
                raise GatewayError(
                    f"Quote line {update.id} does not exist",
                    operation="update",
                    line_id=update.id,
                )
            line.quantity = update.quantity
            uow.commit()
        log.debug("Set quantity of quote line %s to %s", update.id, update.quantity)

    async def insert_quote_line(self, record: AmendmentRecord) -> LineId:
        with self.unit_of_work_factory() as uow:
            repository = uow.repositories.quote_lines
            if uow.repositories.quotes.get(record.quote_id) is None:
                raise GatewayError(
                    f"Quote {record.quote_id} does not exist",
                    operation="insert",
                    line_id=record.amended_from_id,
                )
            line = record.materialize(
                line_id=new_line_id(),
                name=repository.next_line_name(record.quote_id),
            )
            repository.add(line)
            uow.commit()
            line_id = line.id
        log.debug("Inserted amendment %s of quote line %s", line_id, record.amended_from_id)
        return line_id

    async def delete_quote_line(self, line_id: LineId) -> None:
        with self.unit_of_work_factory() as uow:
            repository = uow.repositories.quote_lines
            line = repository.get(line_id)
            if line is None:
                raise GatewayError(
                    f"Quote line {line_id} does not exist",
                    operation="delete",
                    line_id=line_id,
                )
            repository.remove(line)
            uow.commit()
        log.debug("Deleted quote line %s", line_id)


if TYPE_CHECKING:
    from quoteamend.domain.ports import QuoteLineGateway, QuoteLineSource

    _source_check: QuoteLineSource = SqlAlchemyQuoteLineSource()
    _gateway_check: QuoteLineGateway = SqlAlchemyQuoteLineGateway()
