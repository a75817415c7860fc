"""Terminal message helpers for the wputils CLI.

Messages write to stderr so stdout carries only command output.
"""

import click

CAUTION = ("⚠️", "[!]")
SUCCESS = ("✅", "[OK]")
ERROR = ("❌", "[X]")


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(choices: tuple[str, str]) -> str:
    """Return the emoji of an ``(emoji, ascii)`` pair if stderr can encode it."""
    emoji, fallback = choices
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Alpha ignored.``
    """
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**."""
    click.secho(f"{glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Unrecognized color: 'teal'``
    """
    click.secho(f"{glyph(ERROR)}  {msg}", fg="red", bold=True, err=True)
