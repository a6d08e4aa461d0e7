"""Single-file check command and the top-level callback."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis.project import ProjectSummary, analyze_file
from ..exceptions import QualityGatesError
from ..formatters import ReportContext, get_formatter
from ..formatters.base import DEFAULT_MIN_SCORE
from ..logging_config import setup_logging
from . import app
from ._common import FORMAT_CHOICE, console, fail, resolve_config


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Enforce code quality gates on TypeScript/JavaScript sources.

    Rules enforced by default: max 15 lines and complexity 5 per function,
    max 4 parameters, early validation in the first 5 lines, no "any" types,
    no lint-disable comments, no magic numbers, max 300 lines per file.
    """
    if version:
        from .. import __version__

        console.print(f"[bold cyan]quality-gates[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.command()
def check(
    file: Path = typer.Argument(
        ...,
        help="Source file to analyze",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich | json | github",
        click_type=FORMAT_CHOICE,
    ),
    min_score: float = typer.Option(
        DEFAULT_MIN_SCORE,
        "--min-score",
        help="Exit 1 when the score is below this",
        min=0,
        max=100,
    ),
    max_lines_per_function: Optional[int] = typer.Option(
        None, "--max-lines-per-function", help="Override max lines per function", min=1
    ),
    max_complexity: Optional[int] = typer.Option(
        None, "--max-complexity", help="Override max cyclomatic complexity", min=1
    ),
    max_params: Optional[int] = typer.Option(
        None, "--max-params", help="Override max parameters per function", min=0
    ),
    max_file_lines: Optional[int] = typer.Option(
        None, "--max-file-lines", help="Override max lines per file", min=1
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but error logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Analyze a single file and exit non-zero when it scores below the threshold.

    [bold cyan]Examples:[/bold cyan]

      quality-gates check src/index.ts

      quality-gates check src/index.ts --format json --min-score 90
    """
    setup_logging(verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None)

    try:
        gate_config = resolve_config(
            config=config,
            max_lines_per_function=max_lines_per_function,
            max_complexity=max_complexity,
            max_params=max_params,
            max_file_lines=max_file_lines,
        )
        result = analyze_file(file, gate_config)
    except QualityGatesError as e:
        fail(e)

    summary = ProjectSummary(results=[result])
    context = ReportContext(config=gate_config, min_score=min_score, detailed=True)
    get_formatter(output_format.lower()).render(summary, context)

    raise typer.Exit(0 if result.report.score >= min_score else 1)
