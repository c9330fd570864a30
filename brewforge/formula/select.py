"""Artifact selection for one recipe."""

from __future__ import annotations

import logging

from brewforge.core.artifact_registry import ArtifactRegistry, Filter
from brewforge.core.filters import (
    and_,
    by_formats,
    by_goamd64,
    by_goarch,
    by_goarm,
    by_goos,
    by_ids,
    by_type,
    only_replacing_unibins,
    or_,
)
from brewforge.errors import NoArchivesFoundError
from brewforge.models.artifacts import Artifact, ArtifactType
from brewforge.models.recipe import Recipe

logger = logging.getLogger(__name__)

# Operating systems a Homebrew formula can target.
SUPPORTED_OS = ("darwin", "linux")
ARCHIVE_FORMATS = ("zip", "tar.gz")


def recipe_filter(recipe: Recipe) -> Filter:
    """Build the predicate selecting artifacts usable by *recipe*."""
    filters: list[Filter] = [
        or_(*(by_goos(goos) for goos in SUPPORTED_OS)),
        or_(
            and_(by_goarch("amd64"), by_goamd64(recipe.goamd64)),
            by_goarch("arm64"),
            by_goarch("all"),
            and_(by_goarch("arm"), by_goarm(recipe.goarm)),
        ),
        or_(
            and_(by_formats(*ARCHIVE_FORMATS), by_type(ArtifactType.ARCHIVE)),
            by_type(ArtifactType.UPLOADABLE_BINARY),
        ),
        only_replacing_unibins,
    ]
    if recipe.ids:
        filters.append(by_ids(*recipe.ids))
    return and_(*filters)


def select_artifacts(registry: ArtifactRegistry, recipe: Recipe) -> list[Artifact]:
    """Return the artifacts eligible for *recipe*.

    Raises ``NoArchivesFoundError`` when nothing matches.
    """
    selected = registry.filter(recipe_filter(recipe))
    if not selected:
        raise NoArchivesFoundError(
            goamd64=recipe.goamd64,
            goarm=recipe.goarm,
            ids=recipe.ids,
        )
    logger.debug(
        "selected %d artifacts for %s: %s",
        len(selected),
        recipe.name,
        ", ".join(a.name for a in selected),
    )
    return selected
