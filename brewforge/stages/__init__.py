"""brewforge stages — the Run (``formula``) and Publish (``publish``) phases.

Usage::

    from brewforge.stages import FormulaStage, PublishStage

    FormulaStage(client).run_stage(ctx)
    PublishStage(client).run_stage(ctx)
"""

from __future__ import annotations

from brewforge.stages.base import BaseStage, StageExecutionError
from brewforge.stages.formula import FormulaStage
from brewforge.stages.publish import PublishStage

__all__ = [
    "BaseStage",
    "StageExecutionError",
    "FormulaStage",
    "PublishStage",
]
