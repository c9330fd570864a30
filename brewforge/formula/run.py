"""Run phase: render one formula file per recipe."""

from __future__ import annotations

import logging
import os

from brewforge.clients import ReleaseURLTemplater
from brewforge.core.context import PipelineContext
from brewforge.core.skips import SkipMemento
from brewforge.errors import BrewforgeError, RecipeFailedError, SkipError
from brewforge.formula.data import build_formula_data
from brewforge.formula.render import render_formula
from brewforge.formula.select import select_artifacts
from brewforge.models.artifacts import EXTRA_BREW_CONFIG, Artifact, ArtifactType
from brewforge.models.recipe import (
    GitRepoRef,
    PullRequest,
    PullRequestBase,
    Recipe,
    RepoRef,
    ResolvedRecipe,
)
from brewforge.tmpl import Templater

logger = logging.getLogger(__name__)

FORMULA_DIR = "homebrew"


def resolve_repo_ref(ref: RepoRef, templater: Templater) -> RepoRef:
    apply = templater.apply
    pr = ref.pull_request
    return RepoRef(
        owner=apply(ref.owner),
        name=apply(ref.name),
        token=apply(ref.token),
        branch=apply(ref.branch),
        git=GitRepoRef(
            url=apply(ref.git.url),
            private_key=apply(ref.git.private_key),
            ssh_command=apply(ref.git.ssh_command),
        ),
        pull_request=PullRequest(
            enabled=pr.enabled,
            draft=pr.draft,
            base=PullRequestBase(
                owner=apply(pr.base.owner),
                name=apply(pr.base.name),
                branch=apply(pr.base.branch),
            ),
        ),
    )


def resolve_recipe(recipe: Recipe, templater: Templater) -> ResolvedRecipe:
    """Substitute the name, repository and skip policy of *recipe*.

    Pure: *recipe* is left untouched and a new ``ResolvedRecipe`` is
    returned.
    """
    data = recipe.model_dump()
    data.update(
        name=templater.apply(recipe.name),
        repository=resolve_repo_ref(recipe.repository, templater),
        skip_upload=templater.apply(recipe.skip_upload),
    )
    return ResolvedRecipe.model_validate(data)


def formula_path(ctx: PipelineContext, recipe: Recipe) -> str:
    return os.path.join(ctx.dist, FORMULA_DIR, recipe.folder, f"{recipe.name}.rb")


def run_recipe(
    ctx: PipelineContext,
    recipe: Recipe,
    url_templater: ReleaseURLTemplater,
) -> Artifact:
    """Render, write and register the formula for *recipe*.

    Raises ``SkipError`` when the recipe has no target repository and
    lets every fatal error propagate; nothing is written on failure.
    """
    if not recipe.repository.name:
        raise SkipError("brew.repository.name is not set")

    artifacts = select_artifacts(ctx.registry, recipe)
    resolved = resolve_recipe(recipe, ctx.templater)

    data = build_formula_data(
        resolved,
        artifacts,
        ctx.templater,
        url_templater,
        ctx.release.version,
    )
    content = render_formula(data, ctx.templater)

    path = formula_path(ctx, resolved)
    logger.info("writing formula %s", path)
    try:
        os.makedirs(os.path.dirname(path), mode=0o755, exist_ok=True)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.chmod(path, 0o644)
    except OSError as exc:
        raise BrewforgeError(f"failed to write brew formula: {exc}") from exc

    formula = Artifact(
        name=f"{resolved.name}.rb",
        path=path,
        type=ArtifactType.FORMULA,
        extra={EXTRA_BREW_CONFIG: resolved},
    )
    ctx.registry.add(formula)
    return formula


def run_all(ctx: PipelineContext, url_templater: ReleaseURLTemplater) -> list[Artifact]:
    """Run every recipe; skips are reported together at the end.

    A fatal error stops the run at once, wrapped in
    ``RecipeFailedError`` naming the recipe.
    """
    skips = SkipMemento()
    formulas: list[Artifact] = []
    for recipe in ctx.recipes:
        ctx.raise_if_cancelled(f"formula {recipe.name}")
        try:
            formulas.append(run_recipe(ctx, recipe, url_templater))
        except SkipError as skip:
            skips.remember(skip)
        except BrewforgeError as exc:
            raise RecipeFailedError(recipe.name, exc) from exc
    skips.evaluate()
    return formulas
