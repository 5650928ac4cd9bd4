"""Implementation of RoomStore using SQLAlchemy's asyncio extension."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from roomkeeper.adapters.db.schema import participants, rooms
from roomkeeper.domain.aggregates import Room
from roomkeeper.domain.entities import Participant
from roomkeeper.interfaces.room_store import (
    ConcurrentModificationError,
    PersistenceError,
    RoomNotFoundError,
    RoomStore,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

logger = logging.getLogger(__name__)


class SqlAlchemyRoomStore(RoomStore):
    """RoomStore backed by the ``rooms`` and ``participants`` tables.

    Each operation runs on its own connection. Writes run in a single
    transaction, so a failed or cancelled write leaves nothing behind.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    # --- lookups ---

    async def get_by_participant_code(self, identity_code: str) -> Room:
        stmt = select(participants.c.room_code).where(
            participants.c.identity_code == identity_code
        )
        async with self.engine.connect() as conn:
            if (room_code := (await conn.execute(stmt)).scalar_one_or_none()) is None:
                raise RoomNotFoundError("participant code", identity_code)
            room = await self._load(conn, room_code)
        if room is None:
            # participant rows cannot outlive their room (FK), so this is a race
            raise RoomNotFoundError("participant code", identity_code)
        return room

    async def get_by_room_code(self, room_code: str) -> Room:
        async with self.engine.connect() as conn:
            room = await self._load(conn, room_code)
        if room is None:
            raise RoomNotFoundError("room code", room_code)
        return room

    # --- writes ---

    async def update(self, room: Room) -> Room:
        new_version = room.version + 1
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(
                    update(rooms)
                    .where(
                        rooms.c.room_code == room.room_code,
                        rooms.c.version == room.version,
                    )
                    .values(version=new_version, closed_on=room.closed_on)
                )
                if result.rowcount != 1:
                    raise ConcurrentModificationError(
                        room.room_code,
                        expected_version=room.version,
                        actual_version=await self._fetch_version(
                            conn, room.room_code
                        ),
                    )
                await conn.execute(
                    delete(participants).where(
                        participants.c.room_code == room.room_code
                    )
                )
                await self._insert_participants(conn, room)
        except IntegrityError as e:
            logger.debug("Update of room %s violated a constraint", room.room_code)
            raise PersistenceError(
                f"Room '{room.room_code}' could not be saved: constraint violated."
            ) from e

        return Room(
            room.room_code,
            room.participants,
            closed_on=room.closed_on,
            version=new_version,
        )

    async def add(self, room: Room) -> Room:
        """Insert a new room at version 0.

        Raises:
            PersistenceError: If the room code or an identity code is taken.
        """
        try:
            async with self.engine.begin() as conn:
                await conn.execute(
                    insert(rooms).values(
                        room_code=room.room_code, closed_on=room.closed_on, version=0
                    )
                )
                await self._insert_participants(conn, room)
        except IntegrityError as e:
            raise PersistenceError(
                f"Room '{room.room_code}' could not be added: constraint violated."
            ) from e
        return Room(
            room.room_code, room.participants, closed_on=room.closed_on, version=0
        )

    # --- internals ---

    @staticmethod
    async def _load(conn: AsyncConnection, room_code: str) -> Room | None:
        room_row = (
            await conn.execute(
                select(rooms.c.closed_on, rooms.c.version).where(
                    rooms.c.room_code == room_code
                )
            )
        ).fetchone()
        if room_row is None:
            return None

        member_rows = await conn.execute(
            select(
                participants.c.participant_id,
                participants.c.identity_code,
                participants.c.first_name,
                participants.c.last_name,
                participants.c.is_admin,
            )
            .where(participants.c.room_code == room_code)
            .order_by(participants.c.position)
        )
        members = [
            Participant(
                participant_id=int(row.participant_id),
                identity_code=row.identity_code,
                first_name=row.first_name,
                last_name=row.last_name,
                is_admin=bool(row.is_admin),
            )
            for row in member_rows
        ]
        return Room(
            room_code,
            members,
            closed_on=room_row.closed_on,
            version=int(room_row.version),
        )

    @staticmethod
    async def _fetch_version(conn: AsyncConnection, room_code: str) -> int | None:
        stmt = select(rooms.c.version).where(rooms.c.room_code == room_code)
        version = (await conn.execute(stmt)).scalar_one_or_none()
        return None if version is None else int(version)

    @staticmethod
    async def _insert_participants(conn: AsyncConnection, room: Room) -> None:
        if not room.participants:
            return
        rows: list[dict[str, Any]] = [
            {
                "room_code": room.room_code,
                "participant_id": p.participant_id,
                "identity_code": p.identity_code,
                "first_name": p.first_name,
                "last_name": p.last_name,
                "is_admin": p.is_admin,
                "position": position,
            }
            for position, p in enumerate(room.participants)
        ]
        await conn.execute(insert(participants), rows)
