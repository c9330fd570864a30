"""Per-artifact install instructions."""

from __future__ import annotations

import json
import logging

from brewforge.models.artifacts import Artifact, ArtifactType
from brewforge.models.recipe import Recipe
from brewforge.tmpl import Templater

logger = logging.getLogger(__name__)


def split(text: str) -> list[str]:
    """Split a multi-line snippet into lines; blank input gives ``[]``."""
    lines = text.strip().split("\n")
    if lines == [""]:
        return []
    return lines


def _quote(value: str) -> str:
    return json.dumps(value)


def guess_installs(artifact: Artifact) -> list[str]:
    """Infer ``bin.install`` lines from the artifact kind.

    Sorted and deduplicated, so identical inputs give identical output.
    """
    lines: set[str] = set()
    if artifact.type == ArtifactType.UPLOADABLE_BINARY:
        lines.add(f"bin.install {_quote(artifact.name)} => {_quote(artifact.binary_name())}")
    elif artifact.type == ArtifactType.ARCHIVE:
        for binary in artifact.bundled_binaries():
            lines.add(f"bin.install {_quote(binary)}")
    return sorted(lines)


def installs(recipe: Recipe, artifact: Artifact, templater: Templater) -> list[str]:
    """Install lines for *artifact*.

    An explicit ``install`` snippet wins and nothing is inferred;
    otherwise lines are guessed from the artifact.  ``extra_install``
    is appended in both cases.
    """
    extra_install = templater.apply(recipe.extra_install, artifact)
    install = templater.apply(recipe.install, artifact)
    if install:
        return split(install) + split(extra_install)

    guessed = guess_installs(artifact)
    logger.info("guessing install for %s: %s", artifact.name, guessed)
    return guessed + split(extra_install)
