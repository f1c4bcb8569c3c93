"""Rich Console factory and theme for mdfront output.

Consoles render to a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MDFRONT_THEME = Theme(
    {
        "md.ok": "bold green",
        "md.error": "bold red",
        "md.warning": "bold yellow",
        "md.op": "bold cyan",
        "md.key": "dim",
        "md.path": "dim",
        "md.title": "bold",
        "md.series": "magenta",
        "md.on": "green",
        "md.off": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=MDFRONT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
