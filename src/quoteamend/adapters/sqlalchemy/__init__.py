"""SQLAlchemy adapter package for quoteamend."""

from __future__ import annotations

from .gateway import SqlAlchemyQuoteLineGateway, SqlAlchemyQuoteLineSource
from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import SqlAlchemyQuoteLineRepository, SqlAlchemyQuoteRepository
from .unit_of_work import (
    SqlAlchemyQuoteLineUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyQuoteLineGateway",
    "SqlAlchemyQuoteLineRepository",
    "SqlAlchemyQuoteLineSource",
    "SqlAlchemyQuoteLineUnitOfWork",
    "SqlAlchemyQuoteRepository",
    "StartupError",
    "create_all_tables",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
