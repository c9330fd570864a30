"""Main Typer application — imports and registers all CLI commands.

Entry point: ``brewforge`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from brewforge.cli.commands._shared import console
from brewforge.cli.commands.artifacts import artifacts_cmd
from brewforge.cli.commands.formula import formula_cmd
from brewforge.cli.commands.publish import publish_cmd
from brewforge.config import settings

app = typer.Typer(
    name="brewforge",
    help="brewforge: Homebrew formula synthesis and tap publication.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="artifacts", help="List artifacts and what each recipe selects.")(artifacts_cmd)
app.command(name="formula", help="Render formulas into the dist directory.")(formula_cmd)
app.command(name="publish", help="Render formulas and publish them to their taps.")(publish_cmd)


@app.callback()
def configure_logging(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to BREWFORGE_LOG_LEVEL or INFO).",
    ),
) -> None:
    """Install a Rich log handler before any command runs."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
