"""Shared utility functions for sensormaker.

Provides JSON loading, the millisecond clock used for backup names, and the
Rich-based console output used for summaries and error reports.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# Error reports and backup notices go to stderr, one logical line each.
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

USAGE_LINES: tuple[str, ...] = ("Usage:", "sensormaker <sensor.schema>")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Unlike a plain ``json.load`` the root value is returned as-is, so callers
    can reject non-object documents themselves.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


def epoch_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message on stderr."""
    err_console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_notice(message: str) -> None:
    """Print a plain informational line on stderr."""
    err_console.print(escape(message))


def print_usage() -> None:
    """Print the one-line usage reminder, preceded by a blank line."""
    err_console.print()
    for line in USAGE_LINES:
        err_console.print(escape(line))
