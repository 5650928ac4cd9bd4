"""Room store schema.

Defines the ``rooms`` and ``participants`` tables backing
`SqlAlchemyRoomStore`. A room row carries the lifecycle timestamp and the
version fence used for optimistic concurrency; participant rows keep their
display order in ``position``.

Constraints (enforced here):

| Constraint                                   | Purpose                              |
|----------------------------------------------|--------------------------------------|
| PK(room_code)                                | one row per room                     |
| CHECK(version >= 0)                          | versions start at 0                  |
| PK(room_code, participant_id)                | participant ids unique per room      |
| UNIQUE(identity_code)                        | a code resolves to exactly one room  |
| FK(participants.room_code → rooms.room_code) | no participant without its room      |
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    String,
    Table,
    UniqueConstraint,
)

from roomkeeper.adapters.db.metadata import metadata
from roomkeeper.adapters.db.sa_types import UTCDateTime

__all__ = ["rooms", "participants"]

rooms = Table(
    "rooms",
    metadata,
    Column(
        "room_code",
        String(64),
        primary_key=True,
        comment="Externally assigned room code.",
    ),
    Column(
        "closed_on",
        UTCDateTime(),
        nullable=True,
        comment="UTC timestamp the room was closed; NULL while open.",
    ),
    Column(
        "version",
        Integer,
        nullable=False,
        server_default="0",
        comment="Incremented on every accepted write; compared on update.",
    ),
    CheckConstraint("version >= 0", name="non_negative_version"),
    comment="One row per room.",
)

participants = Table(
    "participants",
    metadata,
    Column(
        "room_code",
        String(64),
        ForeignKey("rooms.room_code", ondelete="CASCADE"),
        primary_key=True,
        comment="Owning room.",
    ),
    Column(
        "participant_id",
        Integer,
        primary_key=True,
        autoincrement=False,
        comment="Numeric id, unique within the room.",
    ),
    Column(
        "identity_code",
        String(128),
        nullable=False,
        comment="Possession-based identity token; resolves to exactly one room.",
    ),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column(
        "is_admin",
        Boolean,
        nullable=False,
        server_default="0",
        comment="Whether the participant administers the room.",
    ),
    Column(
        "position",
        Integer,
        nullable=False,
        comment="Display order within the room.",
    ),
    UniqueConstraint("identity_code"),
    CheckConstraint("participant_id >= 0", name="non_negative_participant_id"),
    comment="Room members. Rows are replaced as a set on every room update.",
)
