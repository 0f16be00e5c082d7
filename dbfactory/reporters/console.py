"""
Console reporter - displays connection check results in the terminal.

Uses the Rich library for formatted, colorful output, with a plain
text mode for logs and terminals without color.
"""

import sys
from typing import TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dbfactory.checker import CheckResult


class ConsoleReporter:
    """
    Report connection check results to the console.

    Provides both rich formatted output and plain text.
    """

    # Shown first, in this order, when present in the target config
    PRIORITY_FIELDS = ['driver', 'host', 'port', 'database', 'username', 'prefix']

    def __init__(self, use_rich: bool = True, output: TextIO | None = None):
        """
        Initialize console reporter.

        Args:
            use_rich: Use Rich formatting
            output: Output stream (default: stdout)
        """
        self.use_rich = use_rich
        self.output = output or sys.stdout

        if self.use_rich:
            self.console = Console(file=self.output)

    def report(self, result: CheckResult) -> None:
        """Display check result."""
        if self.use_rich:
            self._report_rich(result)
        else:
            self._report_plain(result)

    def _report_rich(self, result: CheckResult) -> None:
        """Display result using Rich formatting."""
        self.console.print()
        self.console.rule("[bold blue]CONNECTION CHECK[/bold blue]")
        self.console.print()

        info_text = Text()
        info_text.append("Connection: ", style="dim")
        info_text.append(f"{result.connection_name}\n", style="cyan")
        info_text.append("Role: ", style="dim")
        info_text.append(f"{result.role}\n", style="cyan")
        info_text.append("Timestamp: ", style="dim")
        info_text.append(f"{result.timestamp.strftime('%Y-%m-%d %H:%M:%S')}\n", style="cyan")
        info_text.append("Duration: ", style="dim")
        info_text.append(f"{result.duration_ms:.2f} ms", style="cyan")
        self.console.print(Panel(info_text, title="Execution Info", border_style="blue"))

        table = Table(title="Target", box=box.ROUNDED)
        table.add_column("Option", style="bold")
        table.add_column("Value")
        for key, value in self._ordered_items(result.target):
            table.add_row(key, Text(self._truncate_value(value)))
        self.console.print(table)

        self.console.print()
        if result.passed:
            self.console.print("[green]✓ Connection OK[/green]")
        else:
            self.console.print("[red]✗ Connection failed[/red]")
            self.console.print(f"  [red]Error:[/red] {escape(str(result.error_message))}")

        self.console.print()
        self.console.rule()

    def _report_plain(self, result: CheckResult) -> None:
        """Display result using plain text."""
        print("=" * 80, file=self.output)
        print(f"CONNECTION CHECK - {result.timestamp.strftime('%Y-%m-%d %H:%M:%S')}", file=self.output)
        print("=" * 80, file=self.output)
        print(file=self.output)

        print(f"Connection: {result.connection_name}", file=self.output)
        print(f"Role: {result.role}", file=self.output)
        print(f"Duration: {result.duration_ms:.2f} ms", file=self.output)
        print(file=self.output)

        print("TARGET", file=self.output)
        print("-" * 40, file=self.output)
        for key, value in self._ordered_items(result.target):
            print(f"  {key}: {self._truncate_value(value)}", file=self.output)
        print(file=self.output)

        if result.passed:
            print("Status: OK", file=self.output)
        else:
            print("Status: FAILED", file=self.output)
            print(f"  Error: {result.error_message}", file=self.output)

        print("=" * 80, file=self.output)

    def _ordered_items(self, target: dict) -> list[tuple[str, object]]:
        """Priority fields first, then the rest in config order."""
        items = [(k, target[k]) for k in self.PRIORITY_FIELDS if k in target]
        items += [(k, v) for k, v in target.items() if k not in self.PRIORITY_FIELDS]
        return items

    def _truncate_value(self, value, max_len: int = 60) -> str:
        """Truncate long values for display."""
        str_val = str(value)
        if len(str_val) > max_len:
            return str_val[:max_len-3] + "..."
        return str_val


def print_report(result: CheckResult, use_rich: bool = True) -> None:
    """
    Convenience function to print a check result to console.

    Args:
        result: CheckResult to display
        use_rich: Use Rich formatting
    """
    reporter = ConsoleReporter(use_rich=use_rich)
    reporter.report(result)
