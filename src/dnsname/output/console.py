"""Themed Rich console that renders into a string buffer.

Rich leaves out the styling on its own when the buffer is not a terminal,
which covers pipes and ``CliRunner``.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DNS_THEME = Theme(
    {
        "dns.ok": "bold green",
        "dns.error": "bold red",
        "dns.warning": "bold yellow",
        "dns.op": "bold cyan",
        "dns.key": "dim",
        "dns.name": "bold blue",
        "dns.label": "blue",
        "dns.empty": "dim italic",
    }
)

CONSOLE_WIDTH = 120


def create_console() -> Console:
    """A fresh console writing to its own StringIO."""
    return Console(file=StringIO(), theme=DNS_THEME, highlight=False, width=CONSOLE_WIDTH)


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = f"Console writes to {type(buffer).__name__}, not a StringIO buffer"
        raise TypeError(msg)
    return buffer.getvalue()
