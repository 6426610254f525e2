"""Console helpers for the springgen CLI.

Only the CLI shell prints.  The generator core hands back warnings and
file paths, and these helpers turn them into rich output.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()


def format_duration(seconds: float) -> str:
    """Format an elapsed time for the run summary.

    Examples::

        format_duration(0.0123) -> "12ms"
        format_duration(2.345)  -> "2.3s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds <= 0:
        return "0ms"
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m {secs}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value table."""
    table = Table(title=title, show_header=False, title_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


def print_generated(path: Path, project_root: Path | None = None) -> None:
    """Report one written file, relative to *project_root* when given."""
    shown = path.relative_to(project_root) if project_root is not None else path.name
    console.print(f"  [green]Generated:[/green] {shown}")


def print_success(message: str) -> None:
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
