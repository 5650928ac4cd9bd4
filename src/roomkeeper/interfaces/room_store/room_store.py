"""Interface for loading and saving Room aggregates.

Defines the `RoomStore` abstraction: the only way the service layer touches
durable room state. All operations are coroutines; cancelling the awaiting
task aborts the operation without applying a partial write.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roomkeeper.domain.aggregates import Room


class RoomStore(abc.ABC):
    """Load/save boundary for rooms, with compare-and-swap writes."""

    @abc.abstractmethod
    async def get_by_participant_code(self, identity_code: str) -> Room:
        """Load the room containing the participant holding ``identity_code``.

        Args:
            identity_code: The participant's identity code.

        Returns:
            Room: A fresh aggregate; mutating it does not affect the store.

        Raises:
            RoomNotFoundError: If no room has a participant with that code.
        """

    @abc.abstractmethod
    async def get_by_room_code(self, room_code: str) -> Room:
        """Load a room by its room code.

        Args:
            room_code: The externally assigned room code.

        Returns:
            Room: A fresh aggregate; mutating it does not affect the store.

        Raises:
            RoomNotFoundError: If no room has that code.
        """

    @abc.abstractmethod
    async def update(self, room: Room) -> Room:
        """Atomically replace the stored state of ``room``.

        The write is accepted only if the stored version still equals
        ``room.version``; the stored version is then incremented.

        Args:
            room: The mutated aggregate, identified by its room code.

        Returns:
            Room: The room as stored, carrying its new version.

        Raises:
            ConcurrentModificationError: If the stored version differs, or the
                room no longer exists.
            PersistenceError: If the underlying store rejects the write.
        """
