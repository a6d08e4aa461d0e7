"""CLI entry point; registers all subcommands."""

import typer

app = typer.Typer(
    name="quality-gates",
    help="quality-gates - heuristic quality checks for TypeScript sources",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .check import main as _main_callback, check as _check  # noqa: F401, E402
from .scan import scan as _scan  # noqa: F401, E402


def main() -> None:
    """Console script entry point."""
    app()
