"""``brewforge formula`` — render formulas without publishing them."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.panel import Panel

from brewforge.cli.commands._shared import (
    ConfigOption,
    DistOption,
    PrereleaseOption,
    TagOption,
    VersionOption,
    build_context,
    console,
    hosting_client,
)
from brewforge.core.filters import by_type
from brewforge.errors import BrewforgeError, SkipError
from brewforge.models.artifacts import ArtifactType
from brewforge.stages import FormulaStage


def formula_cmd(
    version: str = VersionOption,
    tag: str = TagOption,
    prerelease: str = PrereleaseOption,
    config: Path = ConfigOption,
    dist: Path = DistOption,
) -> None:
    """Render one Homebrew formula per recipe into <dist>/homebrew."""
    ctx, project = build_context(config, dist, version, tag, prerelease)
    stage = FormulaStage(hosting_client(ctx, project))

    skipped = ""
    try:
        stage.run_stage(ctx)
    except SkipError as skip:
        skipped = skip.reason
    except BrewforgeError as exc:
        console.print(f"[bold red]Formula generation failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    written = [f.path for f in ctx.registry.filter(by_type(ArtifactType.FORMULA))]
    lines = [f"[bold green]{len(written)} formula(s) written[/bold green]", ""]
    lines += [f"  {path}" for path in written]
    if skipped:
        lines += ["", f"[yellow]Skipped:[/yellow] {skipped}"]
    console.print(Panel("\n".join(lines), title="[bold]Homebrew Formula[/bold]", border_style="green"))
