"""Rich Console factory and theme for userctl output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

USERCTL_THEME = Theme(
    {
        "userctl.ok": "bold green",
        "userctl.error": "bold red",
        "userctl.op": "bold cyan",
        "userctl.key": "dim",
        "userctl.id": "bold blue",
        "userctl.name": "bold",
        "userctl.email": "magenta",
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
        theme=USERCTL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
