"""Shared CLI helpers."""

from pathlib import Path
from typing import NoReturn, Optional

import click
import typer
from rich.console import Console

from ..config import GateConfig, load_config
from ..exceptions import QualityGatesError

console = Console(stderr=True)

FORMAT_CHOICE = click.Choice(["rich", "json", "github"], case_sensitive=False)


def resolve_config(
    config: Optional[Path] = None,
    max_lines_per_function: Optional[int] = None,
    max_complexity: Optional[int] = None,
    max_params: Optional[int] = None,
    max_file_lines: Optional[int] = None,
) -> GateConfig:
    """Build the gate config from CLI options."""
    return load_config(
        config_file=config,
        max_lines_per_function=max_lines_per_function,
        max_complexity=max_complexity,
        max_params=max_params,
        max_file_lines=max_file_lines,
    )


def fail(error: QualityGatesError) -> NoReturn:
    """Print an error and exit 1."""
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)
