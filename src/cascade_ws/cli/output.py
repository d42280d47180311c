"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
colored status messages, asset summaries and tables. Supports verbosity
levels and the --no-color flag.
"""

from typing import Any, Iterable, Sequence

from rich.console import Console
from rich.table import Table

from ..assets.base import Asset


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Asset edited")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(message, markup=False)

    def print_table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Iterable[Sequence[Any]],
    ) -> None:
        """Display rows as a table.

        Args:
            title: Table title
            columns: Column headers
            rows: Cell values; None is shown as "-"
        """
        table = Table(title=title)
        for column in columns:
            table.add_column(column, overflow="fold")
        for row in rows:
            table.add_row(*["-" if cell is None else str(cell) for cell in row])
        self.console.print(table)

    def print_asset(self, asset: Asset) -> None:
        """Display the common fields of an asset."""
        self.print_table(
            f"{type(asset).__name__}",
            ["Field", "Value"],
            [
                ("type", asset.type.value),
                ("id", asset.id),
                ("name", asset.name),
                ("path", asset.path),
                ("site", asset.site_name),
            ],
        )
        if self.verbosity >= 2:
            self.console.print(asset.dump(), markup=False)
