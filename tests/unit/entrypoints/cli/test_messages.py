"""Unit tests for the CLI status-line helpers.

Glyph choice follows whatever encoding Click reports for stderr at call time,
and every helper writes a bold coloured line to stderr only.
"""

import io

import click
import pytest
from click.testing import CliRunner

from roomkeeper.entrypoints.cli.helpers import messages
from roomkeeper.entrypoints.cli.helpers.messages import (
    CAUTION,
    ERROR,
    SUCCESS,
    error,
    glyph,
    success,
    warn,
)

# pylint: disable=magic-value-comparison

ANSI = {
    "yellow": "\x1b[33m",
    "green": "\x1b[32m",
    "red": "\x1b[31m",
    "bold": "\x1b[1m",
    "reset": "\x1b[0m",
}


class Terminal(io.StringIO):
    """In-memory stderr reporting a fixed encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Encoding Click will try to encode glyphs with."""
        return self._encoding


@pytest.fixture(name="terminal")
def terminal_fixture(monkeypatch, request) -> Terminal:
    """Make glyph selection see a Terminal using ``request.param`` as encoding."""
    term = Terminal(getattr(request, "param", "utf-8"))
    monkeypatch.setattr(click, "get_text_stream", lambda name: term)
    return term


class TestGlyph:
    """Emoji versus ASCII selection."""

    @staticmethod
    @pytest.mark.parametrize("terminal", ["utf-8"], indirect=True)
    def test_unicode_terminal_gets_emoji(terminal):  # pylint: disable=unused-argument
        """A UTF-8 stderr shows the emoji."""
        assert [glyph(p) for p in (CAUTION, SUCCESS, ERROR)] == ["⚠️", "✅", "❌"]

    @staticmethod
    @pytest.mark.parametrize("terminal", ["ascii"], indirect=True)
    def test_ascii_terminal_gets_fallback(terminal):  # pylint: disable=unused-argument
        """An ASCII-only stderr shows the bracketed stand-ins."""
        assert [glyph(p) for p in (CAUTION, SUCCESS, ERROR)] == ["[!]", "[OK]", "[X]"]

    @staticmethod
    def test_encoding_is_checked_on_every_call(monkeypatch):
        """Switching stderr between calls changes the answer; nothing is cached."""
        streams = iter([Terminal("ascii"), Terminal("utf-8")])
        monkeypatch.setattr(click, "get_text_stream", lambda name: next(streams))

        assert glyph(SUCCESS) == "[OK]"
        assert glyph(SUCCESS) == "✅"

    @staticmethod
    def test_missing_encoding_is_treated_as_ascii(monkeypatch):
        """A stream without an encoding attribute gets the ASCII stand-in."""
        monkeypatch.setattr(click, "get_text_stream", lambda name: object())
        assert not messages._supports_character("✅")  # pylint: disable=protected-access


class TestEmitters:
    """warn/success/error output."""

    @staticmethod
    @pytest.mark.parametrize(
        ("emit", "colour", "emoji"),
        [(warn, "yellow", "⚠️"), (success, "green", "✅"), (error, "red", "❌")],
    )
    def test_line_is_bold_and_coloured(
        terminal, emit, colour, emoji  # pylint: disable=unused-argument
    ):
        """Each helper styles its line and prefixes the matching glyph."""

        @click.command()
        def announce() -> None:
            emit("room R1 is closed")

        result = CliRunner().invoke(announce, color=True)
        assert result.exit_code == 0, result.output
        out = result.output
        assert f"{emoji}  room R1 is closed" in out
        for code in (ANSI[colour], ANSI["bold"], ANSI["reset"]):
            assert code in out

    @staticmethod
    @pytest.mark.parametrize("emit", [warn, success, error])
    def test_stdout_stays_clean(monkeypatch, capsys, emit):
        """Nothing lands on stdout, so --json output can be piped safely."""
        monkeypatch.setattr(click, "get_text_stream", lambda name: Terminal("utf-8"))
        emit("BadRequest: target_id: not in this room")
        captured = capsys.readouterr()
        assert "BadRequest: target_id: not in this room" in captured.err
        assert captured.out == ""
