"""Where ROOMKEEPER finds its database and its migrations.

The database URL is read from the environment on every call, never cached, so
the CLI and tests can repoint it between commands. Migration scripts ship
inside the package and are located through ``importlib.resources``.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "ROOMKEEPER_DB_URL"

MIGRATIONS_PACKAGE = "roomkeeper.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """``ROOMKEEPER_DB_URL`` is missing or empty."""

    def __init__(self) -> None:
        super().__init__(f"{DB_URL_ENV_VAR} is not set")


def get_db_url() -> str:
    """Return the async SQLAlchemy URL the room store should use.

    Raises:
        DatabaseUrlNotSetError: The variable is unset or set to "".
    """
    url = os.environ.get(DB_URL_ENV_VAR, "")
    if not url:
        raise DatabaseUrlNotSetError
    return url


def migrations_path() -> str:
    """Filesystem location of the packaged Alembic scripts."""
    return str(files(MIGRATIONS_PACKAGE))


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """An in-memory Alembic config; no ``alembic.ini`` is involved.

    ``db_url`` may be left out for commands that only read the scripts,
    such as ``heads`` and plain ``history``.
    Alembic's status lines go to ``stdout``.
    """
    options = {"script_location": migrations_path()}
    if db_url is not None:
        options["sqlalchemy.url"] = db_url

    cfg = Config(stdout=stdout)
    for key, value in options.items():
        cfg.set_main_option(key, value)
    return cfg
