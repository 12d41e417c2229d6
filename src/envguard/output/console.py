"""Rich Console factory and theme for envguard output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ENVGUARD_THEME = Theme(
    {
        "eg.ok": "bold green",
        "eg.error": "bold red",
        "eg.warning": "bold yellow",
        "eg.op": "bold cyan",
        "eg.key": "bold",
        "eg.dim": "dim",
        "eg.status.set": "green",
        "eg.status.default": "cyan",
        "eg.status.unset": "dim",
        "eg.status.invalid": "bold red",
        "eg.status.missing": "bold yellow",
    }
)

_STATUSES = frozenset({"set", "default", "unset", "invalid", "missing"})


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ENVGUARD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a key status."""
    return f"eg.status.{status}" if status in _STATUSES else ""
