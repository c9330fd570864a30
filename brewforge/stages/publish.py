"""Publish stage — commits rendered formulas to their taps."""

from __future__ import annotations

from typing import Any

from brewforge.clients import Client
from brewforge.core.context import PipelineContext
from brewforge.core.filters import by_type
from brewforge.formula.publish import publish_all
from brewforge.models.artifacts import ArtifactType
from brewforge.stages.base import BaseStage


class PublishStage(BaseStage):
    """Publish every formula artifact through *client*."""

    def __init__(self, client: Client) -> None:
        self._client = client

    @property
    def stage_id(self) -> str:
        return "publish"

    @property
    def display_name(self) -> str:
        return "Homebrew Tap Publish"

    def skip(self, ctx: PipelineContext) -> bool:
        return not ctx.registry.filter(by_type(ArtifactType.FORMULA))

    def execute(self, ctx: PipelineContext) -> dict[str, Any]:
        published = publish_all(ctx, self._client)
        return {"published": [f.name for f in published]}
