"""Run-wide state shared by the formula and publish stages."""

from __future__ import annotations

import threading
from pathlib import Path

from brewforge.config import Settings
from brewforge.core.artifact_registry import ArtifactRegistry
from brewforge.errors import RunCancelledError
from brewforge.models.recipe import Recipe
from brewforge.models.release import ReleaseContext
from brewforge.tmpl import ContextTemplater, Templater


class PipelineContext:
    """Everything a stage needs: release info, recipes, registry, settings.

    Parameters
    ----------
    release:
        Version, tag and environment of the release being packaged.
    recipes:
        The ``brews`` entries to process, in order.
    registry:
        Artifact registry; formula artifacts are appended to it.
    dist:
        Output root; formulas go under ``<dist>/homebrew``.
    settings:
        Runtime settings (tokens, API URLs).  Defaults to a fresh
        ``Settings()``.
    templater:
        Placeholder engine.  Defaults to ``ContextTemplater(release)``.
    """

    def __init__(
        self,
        release: ReleaseContext,
        recipes: list[Recipe],
        registry: ArtifactRegistry,
        dist: Path,
        settings: Settings | None = None,
        templater: Templater | None = None,
    ) -> None:
        self.release = release
        self.recipes = list(recipes)
        self.registry = registry
        self.dist = Path(dist)
        self.settings = settings or Settings()
        self.templater = templater or ContextTemplater(release)
        self._cancel = threading.Event()

    # ------------------------------------------------------------------
    # Cooperative cancellation
    # ------------------------------------------------------------------

    def cancel(self) -> None:
        """Request cancellation; honoured at the next checkpoint."""
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def raise_if_cancelled(self, operation: str) -> None:
        if self._cancel.is_set():
            raise RunCancelledError(f"cancelled before {operation}")
