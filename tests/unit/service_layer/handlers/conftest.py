"""Fixtures for the room handler tests."""

import pytest

from roomkeeper.adapters.room_store import InMemoryRoomStore
from roomkeeper.domain.aggregates import Room

# pylint: disable=redefined-outer-name


@pytest.fixture
def room_store(scenario_room: Room) -> InMemoryRoomStore:
    """In-memory store seeded with room R1 (A1 admin id 1, B2 id 2)."""
    return InMemoryRoomStore([scenario_room])
