"""Formula stage — renders one ``.rb`` file per recipe."""

from __future__ import annotations

from typing import Any

from brewforge.clients import ReleaseURLTemplater
from brewforge.core.context import PipelineContext
from brewforge.formula.run import run_all
from brewforge.stages.base import BaseStage


class FormulaStage(BaseStage):
    """Select, assemble, render and write formulas for every recipe.

    Parameters
    ----------
    url_templater:
        Supplies the default download-URL template for recipes without
        ``url_template``; usually the hosting client.
    """

    def __init__(self, url_templater: ReleaseURLTemplater) -> None:
        self._url_templater = url_templater

    @property
    def stage_id(self) -> str:
        return "formula"

    @property
    def display_name(self) -> str:
        return "Homebrew Formula"

    def execute(self, ctx: PipelineContext) -> dict[str, Any]:
        formulas = run_all(ctx, self._url_templater)
        return {"formulas": [f.path for f in formulas]}
