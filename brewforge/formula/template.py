"""Structural Homebrew formula template (first rendering pass).

``render_structure`` lays out the Ruby formula from a
``FormulaRenderContext``.  Recipe-supplied text is copied verbatim,
placeholders included; resolving them is the second pass's job.
"""

from __future__ import annotations

from brewforge.models.formula import FormulaRenderContext, ReleasePackage
from brewforge.models.recipe import Dependency

HEADER = [
    "# typed: false",
    "# frozen_string_literal: true",
    "",
    "# This file was generated by brewforge. DO NOT EDIT.",
]

# Hardware guard per architecture inside an ``on_linux`` block.
_LINUX_GUARDS = {
    "amd64": "if Hardware::CPU.intel?",
    "arm": "if Hardware::CPU.arm? && !Hardware::CPU.is_64_bit?",
    "arm64": "if Hardware::CPU.arm? && Hardware::CPU.is_64_bit?",
}

# Hardware guard per architecture inside an ``on_macos`` block.
_MACOS_GUARDS = {
    "amd64": "if Hardware::CPU.intel?",
    "arm64": "if Hardware::CPU.arm?",
}


def _title(word: str) -> str:
    # Upper-cases the first letter of every word; letters, digits and
    # underscores continue a word, everything else separates.
    out: list[str] = []
    prev_sep = True
    for ch in word:
        out.append(ch.upper() if prev_sep else ch)
        prev_sep = not (ch.isalnum() or ch == "_")
    return "".join(out)


def formula_name_for(name: str) -> str:
    """Turn a recipe name into a Ruby class name.

    e.g. ``foo_bar@v6.0.0-rc`` becomes ``FooBarATv600Rc``.
    The order of these replacements is significant.
    """
    name = name.replace("-", " ")
    name = name.replace("_", " ")
    name = name.replace(".", "")
    name = name.replace("@", "AT")
    return _title(name).replace(" ", "")


def _q(value: str) -> str:
    return f'"{value}"'


def _indent(lines: list[str], depth: int) -> list[str]:
    pad = "  " * depth
    return [pad + line if line else line for line in lines]


def _package_body(pkg: ReleasePackage) -> list[str]:
    url = f"url {_q(pkg.download_url)}"
    if pkg.download_strategy:
        url += f", using: {pkg.download_strategy}"
    lines = [url, f"sha256 {_q(pkg.sha256)}", "", "def install"]
    lines += _indent(pkg.install, 1)
    lines.append("end")
    return lines


def _guarded(guard: str, pkg: ReleasePackage) -> list[str]:
    return [guard, *_indent(_package_body(pkg), 1), "end"]


def _rosetta_caveat(name: str) -> list[str]:
    return [
        "if Hardware::CPU.arm?",
        "  def caveats",
        "    <<~EOS",
        f"      The darwin_arm64 architecture is not supported for the {name}",
        "      formula at this time. The darwin_amd64 binary may work in compatibility",
        "      mode, but it might not be fully supported.",
        "    EOS",
        "  end",
        "end",
    ]


def _macos_block(ctx: FormulaRenderContext) -> list[str]:
    body: list[str] = []
    for pkg in ctx.macos_packages:
        if pkg.arch == "all":
            body += _package_body(pkg)
        elif ctx.has_only_amd64_macos_pkg:
            body += _package_body(pkg) + [""] + _rosetta_caveat(ctx.name)
        elif pkg.arch in _MACOS_GUARDS:
            body += _guarded(_MACOS_GUARDS[pkg.arch], pkg)
    return ["on_macos do", *_indent(body, 1), "end"]


def _linux_block(ctx: FormulaRenderContext) -> list[str]:
    body: list[str] = []
    for pkg in ctx.linux_packages:
        if pkg.arch == "all":
            body += _package_body(pkg)
        elif pkg.arch in _LINUX_GUARDS:
            body += _guarded(_LINUX_GUARDS[pkg.arch], pkg)
    return ["on_linux do", *_indent(body, 1), "end"]


def _dependency_line(dep: Dependency) -> str:
    line = f"depends_on {_q(dep.name)}"
    if dep.type:
        line += f" => :{dep.type}"
    elif dep.version:
        line += f" => {_q(dep.version)}"
    return line


def _method(name: str, lines: list[str]) -> list[str]:
    return [name, *_indent(lines, 1), "end"]


def render_structure(ctx: FormulaRenderContext) -> str:
    """Render the formula skeleton for *ctx* as text."""
    out = list(HEADER)
    if ctx.custom_require:
        out.append(f"require_relative {_q(ctx.custom_require)}")

    body = [f"desc {_q(ctx.desc)}", f"homepage {_q(ctx.homepage)}", f"version {_q(ctx.version)}"]
    if ctx.license:
        body.append(f"license {_q(ctx.license)}")

    if ctx.dependencies:
        body += [""] + [_dependency_line(dep) for dep in ctx.dependencies]

    if ctx.macos_packages and not ctx.linux_packages:
        body += ["", "depends_on :macos"]
    if ctx.linux_packages and not ctx.macos_packages:
        body += ["", "depends_on :linux"]

    if ctx.macos_packages:
        body += [""] + _macos_block(ctx)
    if ctx.linux_packages:
        body += [""] + _linux_block(ctx)

    if ctx.conflicts:
        body += [""] + [f"conflicts_with {_q(c)}" for c in ctx.conflicts]
    if ctx.custom_block:
        body += [""] + ctx.custom_block
    if ctx.post_install:
        body += [""] + _method("def post_install", ctx.post_install)
    if ctx.caveats:
        body += [""] + _method("def caveats", ["<<~EOS", *_indent(ctx.caveats, 1), "EOS"])
    if ctx.service:
        body += [""] + _method("service do", ctx.service)
    if ctx.tests:
        body += [""] + _method("test do", ctx.tests)

    out.append(f"class {ctx.name} < Formula")
    out += _indent(body, 1)
    out.append("end")
    return "\n".join(out) + "\n"
