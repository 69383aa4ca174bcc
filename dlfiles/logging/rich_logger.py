"""Rich-based event reporter implementations."""
from __future__ import annotations

import sys

from rich.console import Console
from rich.table import Table

from ..core.models import ActionStats


class RichEventReporter:
    """Event reporter using Rich for terminal output.

    Implements the EventReporter protocol with Rich console output.
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        console: Console | None = None,
    ):
        """Initialize the reporter.

        Args:
            verbose: Show debug events (file moves, deletes, digests).
            quiet: Suppress all non-essential output.
            console: Console to print to. Defaults to stderr.
        """
        self._console = console or Console(stderr=True)
        self._verbose = verbose
        self._quiet = quiet

    @property
    def console(self) -> Console:
        return self._console

    # --- Logging Methods ---

    def debug(self, message: str) -> None:
        """Log a debug message (only in verbose mode)."""
        if self._verbose and not self._quiet:
            self._console.print(f"[dim]  {message}[/dim]", highlight=False)

    def info(self, message: str) -> None:
        """Log an info message."""
        if not self._quiet:
            self._console.print(f"[blue]ℹ[/blue] {message}", highlight=False)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._console.print(f"[yellow]⚠[/yellow] {message}", highlight=False)

    def error(self, message: str) -> None:
        """Log an error message."""
        self._console.print(f"[red]✗[/red] {message}", style="red", highlight=False)

    # --- Specialized Output ---

    def print_stats(self, stats: ActionStats) -> None:
        """Print file action statistics."""
        if self._quiet:
            return

        table = Table(title="File Actions", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")

        table.add_row("Files", str(stats.total))
        table.add_row("Moved", str(stats.moved))
        table.add_row("Deleted", str(stats.deleted))
        table.add_row("Untouched", str(stats.untouched))
        if stats.errors > 0:
            table.add_row("Errors", str(stats.errors))

        self._console.print(table)


class QuietEventReporter:
    """Minimal reporter that only shows warnings and errors."""

    def debug(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        print(f"WARNING: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        print(f"ERROR: {message}", file=sys.stderr)

    def print_stats(self, stats: ActionStats) -> None:
        pass
