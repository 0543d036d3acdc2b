"""Terminal message helpers for the hbshelpers CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII
fallbacks. Messages write to stderr so stdout can carry rendered output.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Decides whether to emit emojis or fall back to ASCII so terminals without
    UTF-8 don't raise `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Return the emoji of *pair* when stderr can encode it, else its ASCII fallback."""
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**."""
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)
