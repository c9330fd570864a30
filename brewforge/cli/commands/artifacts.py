"""``brewforge artifacts`` — show what the registry holds and what each recipe selects."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from brewforge.cli.commands._shared import ConfigOption, DistOption, build_context, console
from brewforge.formula.select import recipe_filter


def artifacts_cmd(
    config: Path = ConfigOption,
    dist: Path = DistOption,
    recipe: str = typer.Option(
        None,
        "--recipe",
        "-r",
        help="Only show artifacts selected by this recipe name.",
    ),
) -> None:
    """List registry artifacts with their platform metadata."""
    ctx, _ = build_context(config, dist, version="0.0.0", tag="", prerelease="")

    artifacts = ctx.registry.list()
    title = "Artifacts"
    if recipe:
        match = next((r for r in ctx.recipes if r.name == recipe), None)
        if match is None:
            console.print(f"[bold red]Unknown recipe:[/bold red] {recipe}")
            raise typer.Exit(code=1)
        artifacts = ctx.registry.filter(recipe_filter(match))
        title = f"Artifacts selected by {recipe}"

    if not artifacts:
        console.print("[dim]No artifacts.[/dim]")
        return

    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("OS")
    table.add_column("Arch")
    table.add_column("Variant")
    table.add_column("ID", style="green")

    for a in artifacts:
        variant = a.goamd64 or (f"v{a.goarm}" if a.goarm else "")
        table.add_row(a.name, a.type.value, a.goos, a.goarch, variant, a.id)

    console.print(table)
