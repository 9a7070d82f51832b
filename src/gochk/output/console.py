"""Rich Console factory and theme for gochk output.

Consoles render into a StringIO buffer so every renderer keeps a plain
``-> str`` contract. Rich drops color codes when not attached to a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from gochk.domain.types import Color

GOCHK_THEME = Theme(
    {
        "gochk.ok": "bold green",
        "gochk.error": "bold red",
        "gochk.warning": "bold yellow",
        "gochk.op": "bold cyan",
        "gochk.key": "dim",
        "gochk.path": "dim",
        "gochk.red": "bold red",
        "gochk.green": "green",
        "gochk.yellow": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (wide by default so paths don't wrap).
    """
    return Console(
        file=StringIO(),
        theme=GOCHK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 160,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_color(color: str) -> str:
    """Theme style for a result color tag; unknown tags render unstyled."""
    try:
        return f"gochk.{Color(color).value}"
    except ValueError:
        return ""
