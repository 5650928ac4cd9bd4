"""Alembic runtime for the room database.

The URL is looked up in this order: ``alembic -x url=...``, then the
``sqlalchemy.url`` main option (set by ``roomkeeper.config``), then the
``ROOMKEEPER_DB_URL`` environment variable.

Room URLs name async drivers (``sqlite+aiosqlite``, ``postgresql+asyncpg``),
so online runs open an ``AsyncEngine`` and let Alembic work on the sync
connection it exposes through ``run_sync``. SQLite gets batch mode because
it cannot ALTER most column properties in place.
"""

import asyncio
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

# registers the room tables on the shared metadata
import roomkeeper.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from roomkeeper.adapters.db.metadata import metadata

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = metadata

# autogenerate should flag type and server default drift
DRIFT_CHECKS = {"compare_type": True, "compare_server_default": True}


def get_url() -> str:
    """Pick the database URL, first match wins."""

    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        config.get_main_option("sqlalchemy.url"),
        os.environ.get("ROOMKEEPER_DB_URL"),
    )
    for url in candidates:
        # an un-interpolated alembic.ini placeholder counts as missing
        if url and "%(" not in url:
            return url
    raise RuntimeError("No database URL: set ROOMKEEPER_DB_URL or pass -x url=...")


def run_migrations_offline() -> None:
    """Render the migrations as SQL text (``db upgrade --sql``)."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **DRIFT_CHECKS,
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    """Apply pending revisions over an already open sync connection."""
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",  # pylint: disable=R2004
        **DRIFT_CHECKS,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Connect with a throwaway async engine and apply pending revisions."""
    engine = async_engine_from_config(
        {"sqlalchemy.url": get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(do_run_migrations)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
