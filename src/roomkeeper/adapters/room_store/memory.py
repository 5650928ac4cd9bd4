"""In memory room store implementation.

All rooms are stored in memory and lost when the instance is discarded.
Use for unit tests, prototyping, or scenarios where durability is not required.

This implementation passes all contract tests for the RoomStore interface.
"""

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from roomkeeper.domain.aggregates import Room
from roomkeeper.domain.entities import Participant
from roomkeeper.interfaces.room_store import (
    ConcurrentModificationError,
    PersistenceError,
    RoomNotFoundError,
    RoomStore,
)


@dataclass(frozen=True)
class _StoredRoom:
    """Immutable snapshot of a room as held by the store."""

    room_code: str
    participants: tuple[Participant, ...]
    closed_on: datetime | None
    version: int

    @classmethod
    def from_room(cls, room: Room, version: int) -> "_StoredRoom":
        return cls(room.room_code, room.participants, room.closed_on, version)

    def to_room(self) -> Room:
        return Room(
            self.room_code,
            self.participants,
            closed_on=self.closed_on,
            version=self.version,
        )


class InMemoryRoomStore(RoomStore):
    """In-memory RoomStore for testing and non-durable use cases.

    - Non-durable: all data is lost when the instance is discarded.
    - Every load returns a fresh aggregate; callers never share state.
    - Writes are compare-and-swap on the room version. The check and the swap
      happen without an await in between, so they are atomic for tasks on the
      same event loop. Not thread-safe.
    """

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: dict[str, _StoredRoom] = {}
        self.update_count = 0
        for room in rooms:
            self._insert(room)

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    async def get_by_participant_code(self, identity_code: str) -> Room:
        await asyncio.sleep(0)
        for stored in self._rooms.values():
            if any(p.identity_code == identity_code for p in stored.participants):
                return stored.to_room()
        raise RoomNotFoundError("participant code", identity_code)

    async def get_by_room_code(self, room_code: str) -> Room:
        await asyncio.sleep(0)
        if (stored := self._rooms.get(room_code)) is None:
            raise RoomNotFoundError("room code", room_code)
        return stored.to_room()

    async def update(self, room: Room) -> Room:
        # cancellation point before anything is written
        await asyncio.sleep(0)

        current = self._rooms.get(room.room_code)
        if current is None or current.version != room.version:
            raise ConcurrentModificationError(
                room.room_code,
                expected_version=room.version,
                actual_version=None if current is None else current.version,
            )
        self._check_codes_free(room)

        stored = _StoredRoom.from_room(room, version=current.version + 1)
        self._rooms[room.room_code] = stored
        self.update_count += 1
        return stored.to_room()

    # --------------------------------------------------------------------- #
    # Seeding
    # --------------------------------------------------------------------- #

    async def add(self, room: Room) -> Room:
        """Insert a new room at version 0.

        Raises:
            PersistenceError: If the room code or an identity code is taken.
        """
        await asyncio.sleep(0)
        return self._insert(room).to_room()

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _insert(self, room: Room) -> _StoredRoom:
        if room.room_code in self._rooms:
            raise PersistenceError(f"Room '{room.room_code}' already exists.")
        self._check_codes_free(room)
        stored = _StoredRoom.from_room(room, version=0)
        self._rooms[room.room_code] = stored
        return stored

    def _check_codes_free(self, room: Room) -> None:
        """Identity codes must resolve to a single room across the store."""
        codes = {p.identity_code for p in room.participants}
        for other in self._rooms.values():
            if other.room_code == room.room_code:
                continue
            if taken := codes & {p.identity_code for p in other.participants}:
                raise PersistenceError(
                    f"Identity code(s) already used in room '{other.room_code}': "
                    f"{len(taken)}"
                )
