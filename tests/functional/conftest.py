"""Default marks and fixtures for tests under `tests/functional/`."""

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest
from alembic import command
from click.testing import CliRunner

from roomkeeper.config import build_alembic_config
from roomkeeper.adapters.db.engine import make_engine
from roomkeeper.adapters.room_store import SqlAlchemyRoomStore
from roomkeeper.domain.aggregates import Room

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if FUNCTIONAL_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.functional)


# --- Fixtures ---

# pylint: disable=redefined-outer-name


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    """Path of a not-yet-created SQLite database file."""
    return tmp_path / "rooms.db"


@pytest.fixture
def db_url(db_file: Path) -> str:
    """Async URL of ``db_file``, as a user would export it."""
    return f"sqlite+aiosqlite:///{db_file}"


@pytest.fixture
def runner(db_url: str, tmp_path: Path) -> CliRunner:
    """CliRunner with ROOMKEEPER_DB_URL set and logs kept under tmp_path."""
    return CliRunner(
        env={
            "ROOMKEEPER_DB_URL": db_url,
            "ROOMKEEPER_LOG_PATH": str(tmp_path / "latest.log"),
        }
    )


@pytest.fixture
def migrated_url(db_url: str) -> str:
    """URL of a database upgraded to the head revision."""
    command.upgrade(build_alembic_config(db_url), "head")
    return db_url


@pytest.fixture
def seed_rooms(migrated_url: str) -> Callable[..., None]:
    """Insert rooms into the migrated database from synchronous test code."""

    def _seed(*rooms: Room) -> None:
        async def _run() -> None:
            engine = make_engine(migrated_url)
            try:
                store = SqlAlchemyRoomStore(engine)
                for room in rooms:
                    await store.add(room)
            finally:
                await engine.dispose()

        asyncio.run(_run())

    return _seed


@pytest.fixture
def seeded_url(migrated_url: str, seed_rooms, scenario_room: Room) -> str:
    """Migrated database holding room R1 (A1 admin id 1, B2 id 2)."""
    seed_rooms(scenario_room)
    return migrated_url
