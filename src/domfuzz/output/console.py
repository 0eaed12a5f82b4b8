"""Rich Console factories and theme for domfuzz output.

Buffered consoles render to a StringIO so renderers keep a
``render_*() -> str`` contract. In non-TTY environments (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DOMFUZZ_THEME = Theme(
    {
        "df.ok": "bold green",
        "df.error": "bold red",
        "df.warning": "bold yellow",
        "df.op": "bold cyan",
        "df.key": "dim",
        "df.domain": "bold",
        "df.score": "magenta",
        "df.category": "bold blue",
        "df.status.available": "green",
        "df.status.registered": "red",
        "df.status.parked": "yellow",
        "df.status.timeout": "dim",
        "df.status.error": "bold red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width for stable output.
    """
    return Console(
        file=StringIO(),
        theme=DOMFUZZ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def create_stderr_console() -> Console:
    """Live console on stderr, for progress display."""
    return Console(stderr=True, theme=DOMFUZZ_THEME, highlight=False)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    return f"df.status.{status}" if status else ""
