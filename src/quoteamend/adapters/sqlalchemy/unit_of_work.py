"""SQLAlchemy unit of work for quotes and quote lines.

The adapter keeps one module-level engine. ``startup()`` maps the domain classes,
migrates the schema and binds a session factory; every unit of work then opens
its own session from that factory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from quoteamend.adapters.sqlalchemy.mappings import start_mappers
from quoteamend.adapters.sqlalchemy.migrations import upgrade_head
from quoteamend.adapters.sqlalchemy.repositories import (
    SqlAlchemyQuoteLineRepository,
    SqlAlchemyQuoteRepository,
)
from quoteamend.config import get_database_config
from quoteamend.domain.errors import QuoteAmendError
from quoteamend.domain.ports.unit_of_work import QuoteLineRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(QuoteAmendError):
    """Raised when the SQLAlchemy adapter is used in the wrong lifecycle state."""


@dataclass(slots=True)
class _AdapterState:
    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = field(default=None, repr=False)

    def bind(self, engine: Engine) -> None:
        self.engine = engine
        self.sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def reset(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.sessions = None

    def session_factory(self) -> sessionmaker[Session]:
        if self.sessions is None:
            raise StartupError(
                "Quote store not initialised; call "
                "quoteamend.adapters.sqlalchemy.unit_of_work.startup() first."
            )
        return self.sessions


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the adapter to ``engine`` (or a new one for ``database_uri``) and migrate it.

    A second call raises ``StartupError`` unless ``force`` is set, in which case
    the previous engine is replaced without being disposed.
    """

    if _STATE.engine is not None and not force:
        raise StartupError("Quote store already initialised; pass force=True to rebind.")

    if engine is None:
        engine = create_engine(database_uri or get_database_config().uri, future=True)

    start_mappers()
    upgrade_head(engine=engine)
    _STATE.bind(engine)
    log.debug("Quote store bound to %s", engine.url.render_as_string(hide_password=True))


def configured_engine() -> Engine | None:
    return _STATE.engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the bound engine and forget it."""

    _STATE.reset()


class SqlAlchemyQuoteLineUnitOfWork:
    """Session scope exposing the quote and quote-line repositories.

    Leaving the block closes the session; an exception inside it rolls back
    first. Nothing is committed implicitly.
    """

    def __init__(self) -> None:
        self.session_factory = _STATE.session_factory()
        self._session: Session | None = None
        self._repositories: QuoteLineRepositories | None = None

    def __enter__(self) -> SqlAlchemyQuoteLineUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = self.session_factory()
        self._repositories = QuoteLineRepositories(
            quotes=SqlAlchemyQuoteRepository(self._session),
            quote_lines=SqlAlchemyQuoteLineRepository(self._session),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        if exc_type is not None:
            session.rollback()
        session.close()
        self._session = None
        self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open")
        return self._session

    @property
    def repositories(self) -> QuoteLineRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work is not open")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from quoteamend.domain.ports.unit_of_work import QuoteLineUnitOfWork

    _uow_check: QuoteLineUnitOfWork = SqlAlchemyQuoteLineUnitOfWork()
