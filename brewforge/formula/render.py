"""Two-pass formula rendering.

    render_structure(ctx)  ->  intermediate text (placeholders intact)
        -> Templater.apply  ->  substituted text
        -> sanitize         ->  final formula

Each pass is usable on its own; ``render_formula`` composes them.
"""

from __future__ import annotations

from brewforge.formula.template import render_structure
from brewforge.models.formula import FormulaRenderContext
from brewforge.tmpl import Templater


def sanitize(content: str) -> str:
    """Strip trailing spaces and tabs from every line.

    Lines are split on ``\\n`` only; one trailing ``\\r`` per line is
    dropped.  Every line, including the last, ends with a single
    newline, so applying this twice changes nothing.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    out = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        out.append(line.rstrip(" \t") + "\n")
    return "".join(out)


def render_formula(ctx: FormulaRenderContext, templater: Templater) -> str:
    """Render the final formula text for *ctx*."""
    intermediate = render_structure(ctx)
    substituted = templater.apply(intermediate)
    return sanitize(substituted)
