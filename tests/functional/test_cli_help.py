"""Functional tests for the top-level help and version output."""

import re

from click.testing import CliRunner

from roomkeeper import __version__
from roomkeeper.entrypoints.cli import main

# pylint: disable=magic-value-comparison

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # strip SGR styling only


def _normalize(s: str) -> str:
    """Return `s` with ANSI removed and internal whitespace collapsed."""
    return re.sub(r"\s+", " ", ANSI_RE.sub("", s).strip())


def test_help_lists_command_groups(runner: CliRunner):
    """--help renders the description and every command group."""
    result = runner.invoke(main.roomkeeper, ["--help"])
    assert result.exit_code == 0, result.output
    text = _normalize(result.output)
    assert "Inspect shared rooms and manage their participants." in text
    for group in ("db", "rooms", "participants"):
        assert re.search(rf"\b{group}\b", text)


def test_version(runner: CliRunner):
    """--version prints the package version."""
    result = runner.invoke(main.roomkeeper, ["--version"])
    assert result.exit_code == 0, result.output
    assert __version__ in result.output
