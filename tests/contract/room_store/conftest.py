"""Pytest fixtures for RoomStore contract tests.

Every test in this folder runs once per RoomStore implementation. The store
fixture yields an empty store; tests seed it through ``seed``.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio

from roomkeeper.adapters.db import schema  # noqa: F401 # pylint: disable=unused-import
from roomkeeper.adapters.db.engine import make_engine
from roomkeeper.adapters.db.metadata import metadata
from roomkeeper.adapters.room_store import InMemoryRoomStore, SqlAlchemyRoomStore
from roomkeeper.domain.aggregates import Room
from roomkeeper.interfaces.room_store import RoomStore

# pylint: disable=redefined-outer-name


@pytest_asyncio.fixture(params=["memory", "sqlalchemy"])
async def store(request, sqlite_url: str) -> AsyncIterator[RoomStore]:
    """A fresh, empty RoomStore of each implementation."""
    if request.param == "memory":
        yield InMemoryRoomStore()
        return

    engine = make_engine(sqlite_url)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    try:
        yield SqlAlchemyRoomStore(engine)
    finally:
        await engine.dispose()


@pytest.fixture
def seed(store) -> Callable[[Room], Awaitable[Room]]:
    """Insert a room into the store under test (version 0)."""

    async def _seed(room: Room) -> Room:
        return await store.add(room)

    return _seed
