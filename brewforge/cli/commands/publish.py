"""``brewforge publish`` — render formulas and push them to their taps.

Skips (``skip_upload``, prerelease with ``auto``, no repository) are
reported together after every recipe was attempted and do not fail the
command; the rendered files stay in the dist directory for inspection.
"""

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
from brewforge.errors import BrewforgeError, SkipError
from brewforge.stages import FormulaStage, PublishStage


def publish_cmd(
    version: str = VersionOption,
    tag: str = TagOption,
    prerelease: str = PrereleaseOption,
    config: Path = ConfigOption,
    dist: Path = DistOption,
) -> None:
    """Render formulas, then commit them (or open pull requests)."""
    ctx, project = build_context(config, dist, version, tag, prerelease)
    client = hosting_client(ctx, project)

    skips: list[str] = []
    published: list[str] = []
    for stage in (FormulaStage(client), PublishStage(client)):
        try:
            result = stage.run_stage(ctx)
        except SkipError as skip:
            skips.append(skip.reason)
            continue
        except BrewforgeError as exc:
            console.print(f"[bold red]{stage.display_name} failed:[/bold red] {exc}")
            raise typer.Exit(code=1)
        published += result.get("published", [])

    if skips:
        console.print(
            Panel(
                "\n".join(f"[yellow]-[/yellow] {reason}" for reason in skips),
                title="[bold yellow]Skipped[/bold yellow]",
                border_style="yellow",
            )
        )

    console.print(
        Panel(
            "\n".join(
                [f"[bold green]{len(published)} formula(s) published[/bold green]", ""]
                + [f"  {name}" for name in published]
            ),
            title="[bold]Homebrew Tap[/bold]",
            border_style="green",
        )
    )
