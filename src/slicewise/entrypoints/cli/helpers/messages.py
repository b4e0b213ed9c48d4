"""Terminal message helpers for the slicewise CLI.

Failure lines go to stderr so stdout carries only results, with an
emoji→ASCII fallback for terminals that cannot encode the glyph.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: A single Unicode character to probe (e.g., "❌").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def error_glyph() -> str:
    """Error marker with graceful fallbacks.

    Returns:
        str: "❌" or "[X]" depending on stream support.
    """
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Args:
        msg: The message to display.

    Example:
        ``❌  slice splits utf-8 codepoint``
    """
    g = error_glyph()
    click.secho(f"{g}  {msg}", fg="red", bold=True, err=True)
