"""SQLAlchemy mapping metadata for the quote amendment domain model."""

from __future__ import annotations

import logging
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Index, Numeric, String, Table, orm
from sqlalchemy.orm import configure_mappers

from quoteamend.domain.model import Quote, QuoteLine, new_line_id

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

QuantityType = Numeric(12, 3, asdecimal=True)
MoneyType = Numeric(14, 2, asdecimal=True)

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

quote_table = Table(
    "quote",
    mapper_registry.metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String, nullable=False),
    Column("fulfillment_frequency", String, nullable=True),
)

quote_line_table = Table(
    "quote_line",
    mapper_registry.metadata,
    Column("id", String(64), primary_key=True, default=new_line_id),
    Column(
        "quote_id",
        String(64),
        ForeignKey("quote.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String, nullable=True),
    Column("product_id", String(64), nullable=False),
    Column("product_code", String, nullable=False),
    Column("product_name", String, nullable=True),
    Column("order_account_id", String(64), nullable=True),
    Column("order_account_name", String, nullable=True),
    Column("quantity", QuantityType, nullable=False),
    Column("net_price", MoneyType, nullable=False),
    Column("amend_type", String, nullable=True),
    Column(
        "amended_from_id",
        String(64),
        ForeignKey("quote_line.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("original_quantity", QuantityType, nullable=True),
    Column("original_net_price", MoneyType, nullable=True),
    Index("ix_quote_line_quote_id", "quote_id"),
)


@cache
def start_mappers() -> orm.registry:
    mapper_registry.map_imperatively(Quote, quote_table)
    mapper_registry.map_imperatively(QuoteLine, quote_line_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
