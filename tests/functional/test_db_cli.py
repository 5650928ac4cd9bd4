"""Functional tests for the ``roomkeeper db`` subcommands.

Scope
-----
End-to-end verification of the database CLI via ``click.testing.CliRunner``
against a temporary SQLite file. Commands covered: ``current``, ``heads``,
``history``, ``status`` and ``upgrade``.

Notes
-----
These are black-box tests: they execute the CLI as a user would, exercising
prompts, output and exit codes.
"""

import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from roomkeeper.entrypoints.cli.db import (
    INVALID_URL_FORMAT_MSG,
    MISSING_DB_URL_MSG,
    UPGRADE_SCHEMA_INSTRUCTIONS,
    UPGRADE_SCHEMA_WARNING,
)
from roomkeeper.entrypoints.cli.main import roomkeeper as roomkeeper_cli

# pylint: disable=magic-value-comparison

BASE_REVISION = "3f9c2a7d1e04"
REV_RE = re.compile(r"\b[0-9a-f]{12,}\b")  # Alembic rev ids are 12+ hex chars


@pytest.mark.parametrize(
    "cmd",
    [
        ["db", "current"],
        ["db", "history", "-i"],
        ["db", "upgrade"],
        ["rooms", "show", "-r", "R1"],
        ["participants", "remove", "-c", "A1", "-t", "1", "-y"],
    ],
)
def test_no_url(cmd, tmp_path: Path):
    """Commands requiring the database error out if ROOMKEEPER_DB_URL is not set."""
    runner = CliRunner(
        env={
            "ROOMKEEPER_DB_URL": "",
            "ROOMKEEPER_LOG_PATH": str(tmp_path / "latest.log"),
        }
    )
    result = runner.invoke(roomkeeper_cli, cmd)
    assert result.exit_code == 1
    assert MISSING_DB_URL_MSG in result.output


def test_invalid_url(tmp_path: Path):
    """A malformed URL is reported as such."""
    runner = CliRunner(
        env={
            "ROOMKEEPER_DB_URL": "not a valid url",
            "ROOMKEEPER_LOG_PATH": str(tmp_path / "latest.log"),
        }
    )
    result = runner.invoke(roomkeeper_cli, ["db", "upgrade", "--force"])
    assert result.exit_code != 0
    assert INVALID_URL_FORMAT_MSG in result.output


def test_heads_needs_no_database(runner: CliRunner):
    """``db heads`` lists the packaged head revision."""
    result = runner.invoke(roomkeeper_cli, ["db", "heads"])
    assert result.exit_code == 0, result.output
    assert BASE_REVISION in result.output


def test_new_user_initial_db_setup(runner: CliRunner, db_file: Path):
    """Simulate a new user setting up the database step by step."""

    # The database file does not exist yet; status reports it uninitialized.
    result = runner.invoke(roomkeeper_cli, ["db", "status"])
    assert result.exit_code == 0, result.output
    assert "Database reachable" in result.output
    assert "Backend : sqlite" in result.output
    assert "URL     : sqlite+aiosqlite://" in result.output
    assert "uninitialized" in result.output
    assert UPGRADE_SCHEMA_INSTRUCTIONS in result.output

    # Nothing is applied yet.
    result = runner.invoke(roomkeeper_cli, ["db", "current"])
    assert result.exit_code == 0, result.output
    assert REV_RE.search(result.output) is None

    # The history shows the base revision, with no current marker.
    result = runner.invoke(roomkeeper_cli, ["db", "history", "-i"])
    assert result.exit_code == 0, result.output
    assert BASE_REVISION in result.output
    assert "(current)" not in result.output

    # They try to upgrade, read the warning, and back out.
    result = runner.invoke(roomkeeper_cli, ["db", "upgrade"], input="n\n")
    assert result.exit_code == 1, result.output
    assert UPGRADE_SCHEMA_WARNING in result.output
    assert "Are you sure you want to proceed?" in result.output
    result = runner.invoke(roomkeeper_cli, ["db", "current"])
    assert REV_RE.search(result.output) is None

    # A dry run prints SQL without touching the schema.
    result = runner.invoke(roomkeeper_cli, ["db", "upgrade", "--sql"])
    assert result.exit_code == 0, result.output
    assert "CREATE TABLE rooms" in result.output
    assert "CREATE TABLE participants" in result.output
    result = runner.invoke(roomkeeper_cli, ["db", "current"])
    assert REV_RE.search(result.output) is None

    # They confirm this time.
    result = runner.invoke(roomkeeper_cli, ["db", "upgrade"], input="y\n")
    assert result.exit_code == 0, result.output
    assert "Upgrade complete!" in result.output
    assert db_file.exists()

    result = runner.invoke(roomkeeper_cli, ["db", "current"])
    assert result.exit_code == 0, result.output
    assert BASE_REVISION in result.output

    result = runner.invoke(roomkeeper_cli, ["db", "history", "-i"])
    assert "(current)" in result.output

    result = runner.invoke(roomkeeper_cli, ["db", "status"])
    assert result.exit_code == 0, result.output
    assert f"{BASE_REVISION} (up to date)" in result.output
    assert UPGRADE_SCHEMA_INSTRUCTIONS not in result.output
