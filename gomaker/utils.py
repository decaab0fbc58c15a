"""Shared console helpers for gomaker.

All user-facing output goes through a single Rich ``Console`` so the CLI and
the scaffolder print consistently styled messages and tables.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()


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
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_size(num_bytes: int) -> str:
    """Format a byte count for the summary table.

    Examples::

        format_size(512)  -> "512 B"
        format_size(2048) -> "2.0 KiB"
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"
    return f"{num_bytes / 1024:.1f} KiB"


def describe_files(paths: list[Path], root: Path) -> dict[str, str]:
    """Build ``{relative path: size}`` rows for the files written under *root*."""
    rows: dict[str, str] = {}
    for path in paths:
        rows[str(path.relative_to(root))] = format_size(path.stat().st_size)
    return rows
