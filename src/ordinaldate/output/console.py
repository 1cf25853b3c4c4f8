"""Rich Console factory and theme for ordinaldate output.

Consoles render into a StringIO buffer so renderers can return plain
strings. In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ORDINALDATE_THEME = Theme(
    {
        "od.ok": "bold green",
        "od.error": "bold red",
        "od.warning": "bold yellow",
        "od.op": "bold cyan",
        "od.key": "dim",
        "od.code": "bold magenta",
        "od.date": "bold",
        "od.input": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=ORDINALDATE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
