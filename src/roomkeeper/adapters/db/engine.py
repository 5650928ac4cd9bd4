"""Database engine factory and helpers.

This module centralizes creation of SQLAlchemy asyncio engines and applies
backend-specific tuning:

- **SQLite**: adds connection PRAGMAs to enforce foreign keys, enable WAL,
  and tune durability/temporary storage.
- **Other backends**: no tuning applied here.

Use this module whenever you need an engine so that all connections are
consistently configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import create_async_engine

from roomkeeper.adapters.db.dialects import DialectName, UnsupportedDialect

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite.

    Args:
        url: A database URL string or SQLAlchemy :class:`URL`.

    Returns:
        bool: True if the backend is SQLite, otherwise False.
    """
    try:
        return DialectName.from_string(make_url(str(url)).drivername) is (
            DialectName.SQLITE
        )
    except UnsupportedDialect:
        return False


def make_engine(url: str | URL, *, echo: bool = False) -> AsyncEngine:
    """Create a SQLAlchemy AsyncEngine for the given URL.

    The URL must name an async driver (e.g. ``sqlite+aiosqlite`` or
    ``postgresql+asyncpg``). If the backend is SQLite, applies a set of PRAGMAs
    on every new DBAPI connection:
        - ``foreign_keys=ON`` (enforce referential integrity)
        - ``journal_mode=WAL`` (write-ahead logging for concurrency)
        - ``synchronous=NORMAL`` (balanced durability)
        - ``temp_store=MEMORY`` (reduce temp file I/O)

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        AsyncEngine: Configured SQLAlchemy engine.
    """

    engine = create_async_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine.sync_engine, "connect")
        def _sqlite_pragmas(dbapi_conn, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

    return engine
