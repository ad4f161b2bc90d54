"""Rich terminal formatter for Practice Insight."""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import Confidence, Priority
from ..requirements.models import Requirement
from ..result import AnalysisResult
from ..suggestions.models import ReconciliationReport
from .base import BaseFormatter
from .markdown_formatter import CATEGORY_TITLES

stderr_console = Console(stderr=True)


def _priority_label(priority: Priority) -> str:
    if priority == Priority.HIGH:
        return "[red bold]high[/red bold]"
    elif priority == Priority.MEDIUM:
        return "[yellow]medium[/yellow]"
    else:
        return "[green]low[/green]"


def _confidence_label(confidence: Confidence) -> str:
    if confidence == Confidence.HIGH:
        return "[green]high[/green]"
    elif confidence == Confidence.MEDIUM:
        return "[yellow]medium[/yellow]"
    else:
        return "[red]low[/red]"


class RichFormatter(BaseFormatter):
    """Rich terminal output with a summary panel and suggestion/requirement tables."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or stderr_console

    def render(self, result: AnalysisResult) -> None:
        self._print_summary(result)
        if result.report is not None:
            self._print_report(result.report)
        if result.requirements:
            self._print_requirements(result.requirements)

    def format(self, result: AnalysisResult) -> str:
        with self.console.capture() as capture:
            self.render(result)
        return capture.get()

    # -- private helpers --

    def _print_summary(self, result: AnalysisResult) -> None:
        parts = [f"Scanned [bold]{result.file_count}[/bold] files"]
        if result.report is not None:
            report = result.report
            parts += [
                f"[cyan]{result.practice_count}[/cyan] practices",
                f"[yellow]{len(report.suggestions)}[/yellow] suggestions",
                f"[red]{len(report.missing_practices)}[/red] missing",
                f"[magenta]{len(report.ambiguous_practices)}[/magenta] ambiguous",
            ]
        if result.requirements:
            parts.append(f"[green]{len(result.requirements)}[/green] documents required")
        self.console.print(
            Panel("  |  ".join(parts), title="[bold cyan]Summary[/bold cyan]", expand=False)
        )
        self.console.print()

    def _print_report(self, report: ReconciliationReport) -> None:
        if not report.suggestions:
            self.console.print("[green]No suggestions.[/green]")
            self.console.print()
        else:
            table = Table(title="Suggestions", expand=True)
            table.add_column("Category", style="cyan", width=16)
            table.add_column("Title", style="yellow", ratio=3)
            table.add_column("Priority", justify="center", width=10)
            table.add_column("Impact", justify="center", width=8)
            table.add_column("Reason", style="white", ratio=2)
            for category, suggestions in report.grouped().items():
                for s in suggestions:
                    table.add_row(
                        CATEGORY_TITLES[category],
                        escape(s.title),
                        _priority_label(s.priority),
                        s.impact.value,
                        escape(s.reason),
                    )
            self.console.print(table)
            self.console.print()

        if report.ambiguous_practices:
            self.console.print("[bold]Needs confirmation:[/bold]")
            for p in report.ambiguous_practices:
                self.console.print(f"  [magenta]?[/magenta] {escape(p.title)} [dim]({p.category.value})[/dim]")
            self.console.print()

    def _print_requirements(self, requirements: Sequence[Requirement]) -> None:
        table = Table(title="Required documents", expand=True)
        table.add_column("Document", style="yellow", ratio=2)
        table.add_column("Priority", justify="right", width=8)
        table.add_column("Source", width=14)
        table.add_column("Confidence", justify="center", width=10)
        table.add_column("Reason", style="white", ratio=3)
        for r in requirements:
            table.add_row(
                r.document_name,
                str(r.priority),
                r.detected_from.value,
                _confidence_label(r.confidence),
                escape(r.reason),
            )
        self.console.print(table)
        self.console.print()
