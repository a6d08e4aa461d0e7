"""Project-wide scan command."""

from pathlib import Path
from typing import List, Optional

import typer

from ..analysis.project import DEFAULT_PATTERNS, analyze_project, discover_files
from ..exceptions import QualityGatesError
from ..formatters import ReportContext, get_formatter
from ..formatters.base import DEFAULT_MIN_SCORE
from ..logging_config import setup_logging
from . import app
from ._common import FORMAT_CHOICE, fail, resolve_config


@app.command()
def scan(
    root: Path = typer.Argument(
        Path("."),
        help="Project root to scan",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    patterns: Optional[List[str]] = typer.Option(
        None,
        "--pattern",
        "-p",
        help="Glob pattern(s) relative to root (default: **/*.ts)",
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
        help="Exit 1 when the average score is below this",
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
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers",
        min=1,
        max=32,
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
    Analyze every matching file under ROOT and gate on the average score.

    node_modules and dist are always skipped.

    [bold cyan]Examples:[/bold cyan]

      quality-gates scan

      quality-gates scan src --pattern "**/*.tsx" --pattern "**/*.ts"

      quality-gates scan --format github --min-score 85
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
    except QualityGatesError as e:
        fail(e)

    files = discover_files(root, patterns=patterns or DEFAULT_PATTERNS)
    summary = analyze_project(files, gate_config, workers=workers)

    context = ReportContext(config=gate_config, min_score=min_score, detailed=False)
    get_formatter(output_format.lower()).render(summary, context)

    raise typer.Exit(0 if summary.passed(min_score) else 1)
