"""create rooms and participants tables

Revision ID: 3f9c2a7d1e04
Revises:
Create Date: 2026-10-18 10:12:41.517203

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from roomkeeper.adapters.db.sa_types import UTCDateTime

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1e04"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "rooms",
        sa.Column(
            "room_code",
            sa.String(length=64),
            nullable=False,
            comment="Externally assigned room code.",
        ),
        sa.Column(
            "closed_on",
            UTCDateTime(),
            nullable=True,
            comment="UTC timestamp the room was closed; NULL while open.",
        ),
        sa.Column(
            "version",
            sa.Integer(),
            nullable=False,
            server_default="0",
            comment="Incremented on every accepted write; compared on update.",
        ),
        sa.CheckConstraint(
            "version >= 0", name=op.f("ck_rooms_non_negative_version")
        ),
        sa.PrimaryKeyConstraint("room_code", name=op.f("pk_rooms")),
        comment="One row per room.",
    )

    op.create_table(
        "participants",
        sa.Column(
            "room_code",
            sa.String(length=64),
            nullable=False,
            comment="Owning room.",
        ),
        sa.Column(
            "participant_id",
            sa.Integer(),
            autoincrement=False,
            nullable=False,
            comment="Numeric id, unique within the room.",
        ),
        sa.Column(
            "identity_code",
            sa.String(length=128),
            nullable=False,
            comment="Possession-based identity token; resolves to exactly one room.",
        ),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column(
            "is_admin",
            sa.Boolean(),
            nullable=False,
            server_default="0",
            comment="Whether the participant administers the room.",
        ),
        sa.Column(
            "position",
            sa.Integer(),
            nullable=False,
            comment="Display order within the room.",
        ),
        sa.CheckConstraint(
            "participant_id >= 0",
            name=op.f("ck_participants_non_negative_participant_id"),
        ),
        sa.ForeignKeyConstraint(
            ["room_code"],
            ["rooms.room_code"],
            name=op.f("fk_participants_room_code_rooms"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint(
            "room_code", "participant_id", name=op.f("pk_participants")
        ),
        sa.UniqueConstraint(
            "identity_code", name=op.f("uq_participants_identity_code")
        ),
        comment="Room members. Rows are replaced as a set on every room update.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("participants")
    op.drop_table("rooms")
