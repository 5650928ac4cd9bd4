"""ROOMKEEPER participants CLI: membership changes."""

from __future__ import annotations

import json

import click
import click_extra as clickx

from roomkeeper.bootstrap import AppContainer
from roomkeeper.entrypoints.views import render_result
from roomkeeper.service_layer.commands import RemoveParticipant
from roomkeeper.service_layer.results import Failure, Success

from .db import get_url
from .helpers import error, success
from .helpers.app_runner import run_with_app
from .helpers.room_table import print_room


@click.group(cls=clickx.ExtraGroup)
def participants() -> None:
    """Participant management commands."""


@participants.command()
@click.option(
    "--identity-code",
    "-c",
    "identity_code",
    required=True,
    help="Your identity code (the participant acting on the room).",
)
@click.option(
    "--target-id",
    "-t",
    "target_id",
    required=True,
    type=click.IntRange(min=0),
    help="Numeric id of the participant to remove.",
)
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Do not ask to confirm.")
@click.option("--json", "as_json", is_flag=True, help="Print the outcome as JSON.")
def remove(identity_code: str, target_id: int, assume_yes: bool, as_json: bool) -> None:
    """Remove a participant from your room."""
    url = get_url()
    if not assume_yes:
        click.confirm(f"Remove participant {target_id} from the room?", abort=True)

    cmd = RemoveParticipant(identity_code=identity_code, target_id=target_id)

    async def _handle(app: AppContainer) -> object:
        return await app.message_bus.handle(cmd)

    result = run_with_app(url, _handle)
    if not isinstance(result, (Success, Failure)):
        raise click.ClickException(f"Unexpected result: {result!r}")

    if as_json:
        click.echo(json.dumps(render_result(result), indent=2))
    elif isinstance(result, Success):
        success(f"Participant {target_id} removed.")
        print_room(result.value)

    if isinstance(result, Failure):
        if not as_json:
            for line in result.lines():
                error(line)
        raise click.exceptions.Exit(1)
