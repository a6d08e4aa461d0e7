"""Rich terminal formatter for quality-gates."""

import io
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..analysis.project import FileResult, ProjectSummary
from ..config import GateConfig
from ..models import FunctionRecord, QualityReport
from .base import BaseFormatter, ReportContext

WORST_FILES_SHOWN = 5


def _score_label(score: float, decimals: int = 0) -> str:
    text = f"{score:.{decimals}f}/100"
    if score >= 90:
        return f"[green bold]{text}[/green bold]"
    elif score >= 70:
        return f"[yellow bold]{text}[/yellow bold]"
    else:
        return f"[red bold]{text}[/red bold]"


def _function_issues(func: FunctionRecord, config: GateConfig) -> List[str]:
    issues = []
    if func.line_count > config.max_lines_per_function:
        issues.append(f"{func.line_count} lines")
    if func.complexity > config.max_complexity:
        issues.append(f"complexity {func.complexity}")
    if len(func.params) > config.max_params:
        issues.append(f"{len(func.params)} params")
    if not func.has_early_validation and func.line_count > config.early_validation_min_lines:
        issues.append("no early validation")
    return issues


def _suggestions(report: QualityReport, config: GateConfig) -> List[str]:
    suggestions = []
    if any(f.has_any_type for f in report.functions):
        suggestions.append('Replace "any" types with specific TypeScript types')
    if any(
        not f.has_early_validation and f.line_count > config.early_validation_min_lines
        for f in report.functions
    ):
        suggestions.append(
            f"Add input validation in first {config.early_validation_window} lines of functions"
        )
    if any(f.line_count > config.max_lines_per_function for f in report.functions):
        suggestions.append("Split large functions into smaller, focused functions")
    if report.violations_for("magic-numbers"):
        suggestions.append("Replace magic numbers with named constants")
    return suggestions


class RichFormatter(BaseFormatter):
    """Rich terminal output: per-file detail or a project overview."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, summary: ProjectSummary, context: ReportContext) -> None:
        if context.detailed:
            for result in summary.results:
                self._print_file(result, context)
        else:
            self._print_project(summary, context)
        for failure in summary.failures:
            self.console.print(
                f"[red]Could not analyze {escape(str(failure.path))}:[/red] {escape(failure.reason)}"
            )

    def format(self, summary: ProjectSummary, context: ReportContext) -> str:
        # Render into a throwaway console and hand back the plain text
        recorder = RichFormatter(Console(file=io.StringIO(), record=True, width=100))
        recorder.render(summary, context)
        return recorder.console.export_text()

    # -- private helpers --

    def _print_file(self, result: FileResult, context: ReportContext) -> None:
        report = result.report
        config = context.config
        console = self.console

        summary_text = (
            f"Score: {_score_label(report.score)}  |  "
            f"Lines: [bold]{report.total_lines}[/bold]  |  "
            f"Functions: [bold]{len(report.functions)}[/bold]  |  "
            f"[red]{report.error_count}[/red] errors  |  "
            f"[yellow]{report.warning_count}[/yellow] warnings"
        )
        title = f"[bold cyan]{escape(str(result.path))}[/bold cyan]"
        console.print(Panel(summary_text, title=title, expand=False))
        console.print()

        errors = [v for v in report.violations if v.severity == "error"]
        if errors:
            console.print("[bold]Critical Issues:[/bold]")
            for v in errors:
                console.print(f"  Line {v.line}: {escape(v.message)} [dim]({v.rule})[/dim]")
            console.print()

        problems = [
            (func, _function_issues(func, config))
            for func in report.functions
            if _function_issues(func, config)
        ]
        if problems:
            table = Table(title="Function Issues", expand=False)
            table.add_column("Function", style="yellow")
            table.add_column("Line", justify="right", style="dim")
            table.add_column("Issues")
            for func, issues in problems:
                table.add_row(f"{func.name}()", str(func.start_line), ", ".join(issues))
            console.print(table)
            console.print()

        suggestions = _suggestions(report, config)
        if suggestions:
            console.print("[bold]Suggestions:[/bold]")
            for s in suggestions:
                console.print(f"  [green]->[/green] {s}")
            console.print()

        self._print_verdict(report.score, context.min_score, "Code quality")

    def _print_project(self, summary: ProjectSummary, context: ReportContext) -> None:
        console = self.console
        average = summary.average_score

        if average is None:
            console.print("[yellow]No source files found.[/yellow]")
            return

        console.print(
            Panel(
                f"Files analyzed: [bold]{len(summary.results)}[/bold]  |  "
                f"Average score: {_score_label(average, decimals=1)}",
                title="[bold cyan]Project Quality Summary[/bold cyan]",
                expand=False,
            )
        )
        console.print()

        worst = summary.worst(WORST_FILES_SHOWN)
        table = Table(title="Files Needing Attention", expand=False)
        table.add_column("#", style="dim", width=4)
        table.add_column("File", style="yellow")
        table.add_column("Score", justify="right")
        table.add_column("Issues", justify="right")
        for i, result in enumerate(worst, 1):
            table.add_row(
                str(i),
                escape(str(result.path)),
                _score_label(result.report.score),
                str(len(result.report.violations)),
            )
        console.print(table)
        console.print()

        self._print_verdict(average, context.min_score, "Project quality")

    def _print_verdict(self, score: float, min_score: float, subject: str) -> None:
        if score >= min_score:
            self.console.print(f"[green]PASS[/green] {subject} meets standards")
        else:
            self.console.print(f"[red]FAIL[/red] {subject} needs improvement")
