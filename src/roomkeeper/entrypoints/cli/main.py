"""Top-level ``roomkeeper`` command.

The group itself only sets up logging; the work happens in three subgroups:

``db``
    Apply and inspect schema migrations (forward only).
``rooms``
    Show a room and its participants.
``participants``
    Remove a participant from their room.

Typical session::

    $ roomkeeper db upgrade
    $ roomkeeper rooms show --room-code R1
    $ roomkeeper participants remove -c A1 -t 1
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from roomkeeper import __version__
from roomkeeper.logging import LoggingOptions, install_logging, log_startup

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .participants import participants as participants_group
from .rooms import rooms as rooms_group

logger = logging.getLogger(__name__)


HELP = """ROOMKEEPER: room membership from the command line.

    Inspect shared rooms and manage their participants. Removals go through
    the same checks as any other client and are written with a version
    fence, so two people editing one room cannot undo each other's work.
    """

DEFAULT_LOG_PATH = (
    Path(user_log_dir("roomkeeper", appauthor=False, ensure_exists=True))
    / "latest.log"
)
DEFAULT_LOGGER_LEVELS = ("sqlalchemy=WARNING", "alembic=WARNING", "aiosqlite=WARNING")


def _console_level(verbose: int, quiet: int) -> int:
    """Shift WARNING by ten per -v/-q, clamped to DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet - verbose)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    default=0,
    help="Show more on the console; repeat for more (-vv reaches DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console; repeat to silence errors too.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Developer output: DEBUG level, timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="ROOMKEEPER_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="ROOMKEEPER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="How many records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer DEBUG records in memory regardless of -v/-q and write them "
        "to --log-path once a WARNING is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer out when the command ends.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=DEFAULT_LOGGER_LEVELS,
    envvar="ROOMKEEPER_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Floor for one logger as NAME=LEVEL, e.g. -L sqlalchemy.engine=INFO. "
        "Affects both the console and the flight recorder. Repeatable."
    ),
)
@clickx.pass_context
def roomkeeper(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Configure logging for the subcommand about to run."""

    options = LoggingOptions(
        level=_console_level(verbose_count, quiet_count),
        debug=debug,
        # click-extra leaves ctx.color as None unless --no-color was given
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = install_logging(options)
    log_startup(logger, options, handlers, app_version=__version__)

    ctx.call_on_close(logging.shutdown)


for _group in (db_group, rooms_group, participants_group):
    roomkeeper.add_command(_group)
