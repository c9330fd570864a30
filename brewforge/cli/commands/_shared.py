"""Shared option handling for CLI commands."""

from __future__ import annotations

import os
from pathlib import Path

import typer
from rich.console import Console

from brewforge.clients import Repo
from brewforge.clients.factory import ClientKind, new_client
from brewforge.clients.github import GitHubClient
from brewforge.config import settings
from brewforge.config_io import load_artifacts, load_project_config
from brewforge.core.context import PipelineContext
from brewforge.errors import ConfigError
from brewforge.models.release import ProjectConfig, ReleaseContext

console = Console()

ConfigOption = typer.Option(
    Path(".brewforge.yaml"),
    "--config",
    "-c",
    help="Path to the project file.",
)
DistOption = typer.Option(
    None,
    "--dist",
    "-d",
    help="Dist directory holding artifacts.json (overrides the project file).",
)
VersionOption = typer.Option(..., "--version", "-v", help="Release version, e.g. 1.2.0.")
TagOption = typer.Option("", "--tag", "-t", help="Release tag; defaults to v<version>.")
PrereleaseOption = typer.Option(
    "",
    "--prerelease",
    help="Semver prerelease component (e.g. rc.1); read from the tag or version when omitted.",
)


def build_context(
    config: Path,
    dist: Path | None,
    version: str,
    tag: str,
    prerelease: str,
) -> tuple[PipelineContext, ProjectConfig]:
    """Load the project file and artifacts, or exit with code 1."""
    try:
        project = load_project_config(config)
        dist_root = dist or settings.dist or project.dist
        registry = load_artifacts(dist_root)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    release = ReleaseContext(
        project_name=project.project_name,
        version=version,
        tag=tag or f"v{version}",
        prerelease=prerelease,
        env=dict(os.environ),
    )
    ctx = PipelineContext(
        release=release,
        recipes=project.brews,
        registry=registry,
        dist=dist_root,
        settings=settings,
    )
    return ctx, project


def hosting_client(ctx: PipelineContext, project: ProjectConfig) -> GitHubClient:
    """The GitHub client used for default download URLs and publishing."""
    return new_client(
        ClientKind.GITHUB,
        ctx.settings,
        release_repo=Repo(owner=project.release.owner, name=project.release.name),
    )
