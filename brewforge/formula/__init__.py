"""Homebrew formula pipeline: select, derive, assemble, render, publish.

Usage::

    from brewforge.formula import run_all, publish_all

    run_all(ctx, client)       # writes <dist>/homebrew/**.rb, registers them
    publish_all(ctx, client)   # commits them to their taps
"""

from __future__ import annotations

from brewforge.formula.data import build_formula_data
from brewforge.formula.install import guess_installs, installs, split
from brewforge.formula.publish import publish_all, publish_formula
from brewforge.formula.render import render_formula, sanitize
from brewforge.formula.run import resolve_recipe, run_all, run_recipe
from brewforge.formula.select import recipe_filter, select_artifacts
from brewforge.formula.template import formula_name_for, render_structure

__all__ = [
    "build_formula_data",
    "formula_name_for",
    "guess_installs",
    "installs",
    "publish_all",
    "publish_formula",
    "recipe_filter",
    "render_formula",
    "render_structure",
    "resolve_recipe",
    "run_all",
    "run_recipe",
    "sanitize",
    "select_artifacts",
    "split",
]
