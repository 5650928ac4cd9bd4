"""Logging setup shared by the ROOMKEEPER command line.

Two sinks are wired onto the root logger:

* a Rich console on stderr whose threshold follows ``-v``/``-q``;
* a flight recorder: a bounded in-memory buffer kept at DEBUG that is dumped
  to a file as soon as a WARNING (or worse) is logged.

Console lines from libraries such as SQLAlchemy or aiosqlite are tagged with
the library name so they stand out from our own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "roomkeeper"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

_CONSOLE_FORMAT = "%(prefix)s %(message)s"
_CONSOLE_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"
_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(taskName)s] %(levelname)s "
    "%(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Stamp ``record.prefix`` with the originating library, e.g. ``[aiosqlite]``.

    Our own records get an empty prefix. The filter never drops anything.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        ours = record.name.startswith(PROJECT_PREFIX)
        record.prefix = "" if ours else f"[{record.name.split('.')[0]}]"
        return True


@dataclass(frozen=True)
class LoggingOptions:
    """What the top-level CLI options asked for."""

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = True
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    ``debug_mode`` lowers the threshold to DEBUG, adds timestamps and source
    links, and shows full logger names instead of the library prefix.
    """

    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=_CONSOLE_DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=_CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory buffer that dumps into ``path``.

    The file is opened lazily and truncated, so a run that never reaches
    ``flush_level`` leaves any previous log untouched.
    """

    sink = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    sink.setLevel(logging.DEBUG)
    sink.setFormatter(
        logging.Formatter(_RECORDER_FORMAT, defaults={"taskName": "-"})
    )
    return MemoryHandler(
        capacity,
        flushLevel=flush_level,
        target=sink,
        flushOnClose=flush_on_close,
    )


def install_logging(options: LoggingOptions) -> list[logging.Handler]:
    """Replace the root logger's handlers according to ``options``.

    The root logger itself stays at DEBUG; each handler applies its own
    threshold. Per-logger overrides are applied last.
    """

    handlers: list[logging.Handler] = [
        config_console_handler(
            level=options.level, debug_mode=options.debug, color=options.color
        )
    ]
    if options.flight_recorder and options.log_path is not None:
        handlers.append(
            config_flight_recorder(
                options.log_path,
                capacity=options.flight_capacity,
                flush_on_close=options.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in options.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: Logger,
    options: LoggingOptions,
    handlers: list[logging.Handler],
    *,
    app_version: str,
) -> None:
    """Announce the run at INFO, then dump the environment at DEBUG."""

    logger.info(
        "ROOMKEEPER %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(options.level),
        "ON" if options.flight_recorder else "OFF",
    )

    environment = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Alembic": alembic.__version__,
        "SQLAlchemy": sqlalchemy.__version__,
        "Handlers": [type(h).__name__ for h in handlers],
    }
    for key, value in environment.items():
        logger.debug("%s: %s", key, value)

    if options.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            options.log_path or "<none>",
            options.flight_capacity,
            options.force_flush,
        )
    overrides = {
        name: logging.getLevelName(lvl) for name, lvl in options.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
