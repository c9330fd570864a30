"""Publish phase: push rendered formulas to their tap repositories."""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Callable
from pathlib import Path

from brewforge.clients import Client, Repo, supports_pull_requests
from brewforge.clients.factory import new_git_upload_client, new_if_token
from brewforge.config import Settings
from brewforge.core.context import PipelineContext
from brewforge.core.filters import by_type
from brewforge.core.skips import SkipMemento
from brewforge.errors import (
    BrewforgeError,
    PullRequestUnsupportedError,
    RecipeFailedError,
    RunCancelledError,
    SkipError,
)
from brewforge.models.artifacts import EXTRA_BREW_CONFIG, Artifact, ArtifactType
from brewforge.models.recipe import CommitAuthor, ResolvedRecipe

logger = logging.getLogger(__name__)

GitClientFactory = Callable[[Repo, Settings], Client]


def formula_repo_path(folder: str, filename: str) -> str:
    """Destination path inside the tap, always ``/``-separated."""
    return posixpath.join(folder, filename)


def publish_formula(
    ctx: PipelineContext,
    formula: Artifact,
    client: Client,
    git_client_factory: GitClientFactory = new_git_upload_client,
) -> None:
    """Publish one formula artifact.

    Returns once the file is committed (and the pull request opened, if
    enabled).  Raises ``SkipError`` when the upload policy says not to
    publish and ``PullRequestUnsupportedError`` when a pull request is
    requested from a client that cannot open one; the capability check
    happens before anything is committed.
    """
    recipe = formula.extra_as(EXTRA_BREW_CONFIG, ResolvedRecipe)

    skip_upload = recipe.skip_upload.strip()
    if skip_upload == "true":
        raise SkipError("brew.skip_upload is set")
    if skip_upload == "auto" and ctx.release.is_prerelease:
        raise SkipError("prerelease detected with 'auto' upload, skipping homebrew publish")

    ref = recipe.repository
    repo = Repo.from_ref(ref)
    gpath = formula_repo_path(recipe.folder, formula.name)

    templater = ctx.templater
    message = templater.apply(recipe.commit_msg_template)
    author = CommitAuthor(
        name=templater.apply(recipe.commit_author.name),
        email=templater.apply(recipe.commit_author.email),
    )
    try:
        content = Path(formula.path).read_bytes()
    except OSError as exc:
        raise BrewforgeError(f"failed to read formula {formula.path}: {exc}") from exc

    ctx.raise_if_cancelled(f"publishing {formula.name}")

    if ref.git.url:
        git_client_factory(repo, ctx.settings).create_file(author, repo, content, gpath, message)
        return

    client = new_if_token(client, ref.token, ctx.settings)

    if not ref.pull_request.enabled:
        client.create_file(author, repo, content, gpath, message)
        return

    logger.info("brews.pull_request enabled, creating a PR")
    if not supports_pull_requests(client):
        raise PullRequestUnsupportedError()

    client.create_file(author, repo, content, gpath, message)
    base = ref.pull_request.base
    client.open_pull_request(
        Repo(owner=base.owner, name=base.name, branch=base.branch),
        repo,
        message,
        ref.pull_request.draft,
    )


def publish_all(
    ctx: PipelineContext,
    client: Client,
    git_client_factory: GitClientFactory = new_git_upload_client,
) -> list[Artifact]:
    """Publish every formula in the registry.

    Each formula is attempted even if an earlier one was skipped; the
    skips are raised together once all have been tried.  A fatal error
    stops immediately, wrapped in ``RecipeFailedError`` naming the recipe.
    """
    skips = SkipMemento()
    published: list[Artifact] = []
    for formula in ctx.registry.filter(by_type(ArtifactType.FORMULA)):
        try:
            publish_formula(ctx, formula, client, git_client_factory)
        except SkipError as skip:
            skips.remember(skip)
            continue
        except RunCancelledError:
            raise
        except BrewforgeError as exc:
            logger.error("publishing %s failed", formula.name)
            raise RecipeFailedError(formula.name.removesuffix(".rb"), exc) from exc
        published.append(formula)
    skips.evaluate()
    return published
