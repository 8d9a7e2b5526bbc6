"""Application wiring for quote amendment services."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from quoteamend.adapters.http import HttpQuoteLineGateway, HttpQuoteLineSource
from quoteamend.adapters.notification import LoggingNotifier
from quoteamend.adapters.sqlalchemy import (
    SqlAlchemyQuoteLineGateway,
    SqlAlchemyQuoteLineSource,
    SqlAlchemyQuoteLineUnitOfWork,
)
from quoteamend.adapters.sqlalchemy.unit_of_work import is_started, startup
from quoteamend.config import get_record_service_config
from quoteamend.domain.amendments import QuoteAmendmentService
from quoteamend.domain.ports.unit_of_work import QuoteLineUnitOfWork

if TYPE_CHECKING:
    from quoteamend.config import RecordServiceConfig
    from quoteamend.domain.ports import Notifier, RefreshSignal

UnitOfWorkFactory = Callable[[], QuoteLineUnitOfWork]

log = getLogger(__name__)


def build_local_service(
    quote_id: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    notifier: Notifier | None = None,
    on_refresh: RefreshSignal | None = None,
    database_uri: str | None = None,
) -> QuoteAmendmentService:
    """Service reading and writing quote lines in the local SQLAlchemy store."""

    if unit_of_work_factory is None:
        if not is_started():
            startup(database_uri=database_uri)
        unit_of_work_factory = SqlAlchemyQuoteLineUnitOfWork
    log.debug("Building local amendment service for quote %s", quote_id)
    return QuoteAmendmentService(
        quote_id=quote_id,
        source=SqlAlchemyQuoteLineSource(unit_of_work_factory),
        gateway=SqlAlchemyQuoteLineGateway(unit_of_work_factory),
        notifier=notifier or LoggingNotifier(),
        on_refresh=on_refresh,
    )


def build_remote_service(
    quote_id: str,
    *,
    config: RecordServiceConfig | None = None,
    notifier: Notifier | None = None,
    on_refresh: RefreshSignal | None = None,
) -> QuoteAmendmentService:
    """Service talking to the remote quote-line record service over HTTP."""

    effective_config = config or get_record_service_config()
    log.debug(
        "Building remote amendment service for quote %s at %s",
        quote_id,
        effective_config.base_url,
    )
    return QuoteAmendmentService(
        quote_id=quote_id,
        source=HttpQuoteLineSource(config=effective_config),
        gateway=HttpQuoteLineGateway(config=effective_config),
        notifier=notifier or LoggingNotifier(),
        on_refresh=on_refresh,
    )


def build_service(
    quote_id: str,
    *,
    remote: bool = False,
    notifier: Notifier | None = None,
) -> QuoteAmendmentService:
    if remote:
        return build_remote_service(quote_id, notifier=notifier)
    return build_local_service(quote_id, notifier=notifier)
