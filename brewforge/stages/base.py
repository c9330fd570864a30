"""Abstract base stage with an enforced lifecycle.

Every concrete stage inherits from BaseStage and implements ``execute()``
(and optionally ``skip()``).  The ``run_stage()`` wrapper is **not
overridable** — it enforces the canonical ordering:

    skip? -> cancellation checkpoint -> execute -> summarize

Skips are not failures: ``SkipError`` passes through untouched so the
caller can report it, while every other error is wrapped in
``StageExecutionError`` with the stage id.
"""

from __future__ import annotations

import abc
import logging
from typing import Any, final

from brewforge.core.context import PipelineContext
from brewforge.errors import BrewforgeError, SkipError

logger = logging.getLogger(__name__)


class StageExecutionError(BrewforgeError):
    """Raised when a stage's execute() method fails."""


class BaseStage(abc.ABC):
    """Abstract base for brewforge stages.

    Subclasses **must** implement:
        * ``stage_id``   — unique identifier (e.g. ``"formula"``).
        * ``display_name`` — human-readable name for CLI output.
        * ``execute(ctx)`` — the stage's core logic.

    Subclasses **may** override ``skip(ctx)``.

    Subclasses **must not** override ``run_stage()``.
    """

    @property
    @abc.abstractmethod
    def stage_id(self) -> str:
        ...

    @property
    @abc.abstractmethod
    def display_name(self) -> str:
        ...

    @abc.abstractmethod
    def execute(self, ctx: PipelineContext) -> dict[str, Any]:
        """Execute the stage's core logic and return a result dict."""
        ...

    def skip(self, ctx: PipelineContext) -> bool:
        """Whether the stage has nothing to do for *ctx*."""
        return not ctx.recipes

    # ------------------------------------------------------------------
    # Lifecycle (not overridable)
    # ------------------------------------------------------------------

    @final
    def run_stage(self, ctx: PipelineContext) -> dict[str, Any]:
        """Execute the full stage lifecycle.  **Do not override.**"""
        if self.skip(ctx):
            logger.info("%s [%s] skipped: nothing to do", self.display_name, self.stage_id)
            return {"stage_id": self.stage_id, "skipped": True}

        ctx.raise_if_cancelled(f"stage {self.stage_id}")
        logger.info("%s [%s] starting", self.display_name, self.stage_id)

        try:
            result = self.execute(ctx)
        except SkipError as skip:
            logger.warning("%s [%s] skipped: %s", self.display_name, self.stage_id, skip.reason)
            raise
        except Exception as exc:
            logger.error("%s [%s] execution failed: %s", self.display_name, self.stage_id, exc)
            raise StageExecutionError(f"Stage {self.stage_id} failed: {exc}") from exc

        logger.info("%s [%s] done", self.display_name, self.stage_id)
        result.setdefault("stage_id", self.stage_id)
        result.setdefault("skipped", False)
        return result

    def __repr__(self) -> str:
        return f"<{type(self).__name__} stage_id={self.stage_id!r}>"
