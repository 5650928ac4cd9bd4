"""Rich rendering of a room's participant list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from roomkeeper.domain.aggregates import Room


def build_room_table(room: Room) -> Table:
    """Build a table of the room's participants in display order."""
    state = (
        f"closed {room.closed_on:%Y-%m-%d %H:%M} UTC" if room.closed_on else "open"
    )
    title = f"Room {room.room_code} ({state})"
    # rich wraps the title to the table width; keep it on one line
    table = Table(title=title, min_width=len(title))
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Role")
    for participant in room.participants:
        table.add_row(
            str(participant.participant_id),
            participant.full_name,
            "Admin" if participant.is_admin else "",
        )
    return table


def print_room(room: Room, console: Console | None = None) -> None:
    """Print the participant table to stdout."""
    (console or Console()).print(build_room_table(room))
