"""Validation issue formatting with Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from dbc_to_json.validation.errors import ValidationResult


class ErrorTable:
    """Display validation issues as a table."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error table formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as table, errors first."""
        table = Table(title="Validation Issues")

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Location", style="dim")
        table.add_column("Message")
        table.add_column("Hint", style="dim")

        for issue in result.errors + result.warnings:
            severity_style = "red" if issue.severity.value == "error" else "yellow"
            severity = f"[{severity_style}]{issue.severity.value.upper()}[/{severity_style}]"

            table.add_row(
                issue.code,
                severity,
                issue.path,
                escape(issue.message),
                escape(issue.suggestion or ""),
            )

        self.console.print(table)

    def print_counts(self, result: ValidationResult) -> None:
        """Print the error and warning totals on one line."""
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        if error_count > 0:
            self.console.print(f"[red bold]✗ {error_count} error(s)[/red bold]", end="")
        if warning_count > 0:
            if error_count > 0:
                self.console.print(", ", end="")
            self.console.print(f"[yellow]{warning_count} warning(s)[/yellow]", end="")
        self.console.print()
