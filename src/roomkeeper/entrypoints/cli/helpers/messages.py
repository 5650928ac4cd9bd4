"""Status lines for the ROOMKEEPER CLI.

Every line goes to stderr, leaving stdout for data such as ``--json``
output or ``db upgrade --sql``. Each kind of line has an emoji and an ASCII
stand-in; the emoji is used only when stderr's encoding can represent it.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Whether stderr, as Click sees it right now, can encode ``character``."""

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        character.encode(getattr(stream, "encoding", None) or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Return the emoji half of ``pair`` if stderr can show it, else the ASCII half."""
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def _emit(pair: tuple[str, str], msg: str, colour: str) -> None:
    click.secho(f"{glyph(pair)}  {msg}", fg=colour, bold=True, err=True)


def warn(msg: str) -> None:
    """Bold yellow caution line, e.g. ``⚠️  The schema is out of date.``"""
    _emit(CAUTION, msg, "yellow")


def success(msg: str) -> None:
    """Bold green confirmation line, e.g. ``✅  Participant 2 removed.``"""
    _emit(SUCCESS, msg, "green")


def error(msg: str) -> None:
    """Bold red failure line, e.g. ``❌  Forbidden: identity_code: ...``"""
    _emit(ERROR, msg, "red")
