"""Domain port definitions for adapters."""

from __future__ import annotations

from .notification import Notifier
from .persistence import QuoteLineRepository, QuoteRepository, Repository
from .records import QuoteLineGateway, QuoteLineSource, RefreshSignal
from .unit_of_work import (
    QuoteLineRepositories,
    QuoteLineUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "Notifier",
    "QuoteLineGateway",
    "QuoteLineRepositories",
    "QuoteLineRepository",
    "QuoteLineSource",
    "QuoteLineUnitOfWork",
    "QuoteRepository",
    "RefreshSignal",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
