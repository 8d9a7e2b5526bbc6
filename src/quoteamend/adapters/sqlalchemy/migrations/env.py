"""Alembic environment for the quote store."""

from __future__ import annotations

from alembic import context
from sqlalchemy import create_engine, pool

from quoteamend.adapters.sqlalchemy.mappings import mapper_registry, start_mappers
from quoteamend.config import get_database_config

config = context.config

start_mappers()
target_metadata = mapper_registry.metadata

_CONFIGURE_OPTIONS: dict[str, object] = {
    "target_metadata": target_metadata,
    "render_as_batch": True,
    "compare_type": True,
}


def _database_url() -> str:
    return config.get_main_option("sqlalchemy.url") or get_database_config().uri


def run_migrations_offline() -> None:
    context.configure(url=_database_url(), literal_binds=True, **_CONFIGURE_OPTIONS)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Migrate over the caller's connection when one is handed in, else a fresh engine."""

    connection = config.attributes.get("connection")
    if connection is not None:
        context.configure(connection=connection, **_CONFIGURE_OPTIONS)
        with context.begin_transaction():
            context.run_migrations()
        return

    engine = create_engine(_database_url(), poolclass=pool.NullPool, future=True)
    try:
        with engine.connect() as own_connection:
            context.configure(connection=own_connection, **_CONFIGURE_OPTIONS)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
