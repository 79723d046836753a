"""Rich Console factory and theme for netd3 output.

Consoles render into a StringIO buffer so formatters keep returning
plain strings; Rich drops color codes when not attached to a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NETD3_THEME = Theme(
    {
        "netd3.ok": "bold green",
        "netd3.error": "bold red",
        "netd3.op": "bold cyan",
        "netd3.key": "dim",
        "netd3.widget": "bold magenta",
        "netd3.expr": "italic yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=NETD3_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
