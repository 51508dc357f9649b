"""Rich-powered console output for Renovate AI."""

from __future__ import annotations

import logging

from rich.console import Console as RichConsole
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from renovate_ai.github.models import FileDiff


class Console:
    """Terminal output for Renovate AI using Rich.

    Status lines go to stdout; errors and log records go to stderr.
    """

    def __init__(self) -> None:
        self.console = RichConsole()
        self.err_console = RichConsole(stderr=True)

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {message}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {message}")

    def show_diffs(self, diffs: list[FileDiff], total_files: int) -> None:
        """List the dependency files that went into the prompt."""
        table = Table(
            title=f"Dependency files ({len(diffs)} of {total_files})",
            border_style="cyan",
        )
        table.add_column("File", style="bold")
        table.add_column("Diff chars", justify="right", style="cyan")
        for d in diffs:
            table.add_row(d.file_name, str(len(d.diff_text)))
        self.console.print(table)

    def log_handler(self, level: int = logging.INFO) -> logging.Handler:
        """A logging handler that renders records on stderr."""
        handler = RichHandler(console=self.err_console, show_path=False)
        handler.setLevel(level)
        return handler
