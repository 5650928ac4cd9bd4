"""ROOMKEEPER rooms CLI: read-only views of a room."""

from __future__ import annotations

import json
import logging

import click
import click_extra as clickx

from roomkeeper.bootstrap import AppContainer
from roomkeeper.domain.aggregates import Room
from roomkeeper.entrypoints.views import render_room
from roomkeeper.interfaces.room_store import RoomNotFoundError

from .db import get_url
from .helpers import error
from .helpers.app_runner import run_with_app
from .helpers.room_table import print_room

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def rooms() -> None:
    """Room inspection commands."""


@rooms.command()
@click.option(
    "--participant-code",
    "-p",
    "participant_code",
    help="Identity code of a participant of the room.",
)
@click.option("--room-code", "-r", "room_code", help="Code of the room.")
@click.option("--json", "as_json", is_flag=True, help="Print the room as JSON.")
def show(participant_code: str | None, room_code: str | None, as_json: bool) -> None:
    """Show a room and its participants."""
    if (participant_code is None) == (room_code is None):
        raise click.UsageError("Pass exactly one of --participant-code or --room-code.")

    async def _load(app: AppContainer) -> Room:
        if participant_code is not None:
            return await app.room_store.get_by_participant_code(participant_code)
        return await app.room_store.get_by_room_code(str(room_code))

    try:
        room = run_with_app(get_url(), _load)
    except RoomNotFoundError as e:
        logger.debug("rooms show: %s", e)
        error("Room not found.")
        raise click.exceptions.Exit(1) from e

    if as_json:
        click.echo(json.dumps(render_room(room), indent=2))
    else:
        print_room(room)
