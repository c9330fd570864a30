"""Fold selected artifacts into a ``FormulaRenderContext``."""

from __future__ import annotations

import logging
from collections import Counter

from brewforge.clients import ReleaseURLTemplater
from brewforge.errors import AmbiguousPlatformError
from brewforge.formula.install import installs, split
from brewforge.formula.template import formula_name_for
from brewforge.models.artifacts import Artifact
from brewforge.models.formula import FormulaRenderContext, ReleasePackage
from brewforge.models.recipe import Recipe
from brewforge.tmpl import Templater

logger = logging.getLogger(__name__)


def _sorted_packages(packages: list[ReleasePackage]) -> list[ReleasePackage]:
    return sorted(packages, key=lambda p: (p.os, p.arch), reverse=True)


def build_formula_data(
    recipe: Recipe,
    artifacts: list[Artifact],
    templater: Templater,
    url_templater: ReleaseURLTemplater,
    version: str,
) -> FormulaRenderContext:
    """Assemble the rendering context for *recipe* from *artifacts*.

    Raises
    ------
    ChecksumError
        If any artifact cannot be hashed.
    AmbiguousPlatformError
        If two artifacts target the same OS/arch pair.
    TemplateError
        If the download URL or install snippets fail to substitute.
    """
    url_template = recipe.url_template
    macos: list[ReleasePackage] = []
    linux: list[ReleasePackage] = []
    counts: Counter[tuple[str, str]] = Counter()

    for artifact in artifacts:
        sha256 = artifact.checksum("sha256")

        if not url_template:
            url_template = url_templater.release_url_template()

        package = ReleasePackage(
            download_url=templater.apply(url_template, artifact),
            sha256=sha256,
            os=artifact.goos,
            arch=artifact.goarch,
            download_strategy=recipe.download_strategy,
            install=installs(recipe, artifact, templater),
        )
        counts[(package.os, package.arch)] += 1

        if package.os == "darwin":
            macos.append(package)
        elif package.os == "linux":
            linux.append(package)

    duplicates = [f"{goos}/{goarch}" for (goos, goarch), n in counts.items() if n > 1]
    if duplicates:
        raise AmbiguousPlatformError(duplicates)

    return FormulaRenderContext(
        name=formula_name_for(recipe.name),
        desc=recipe.description,
        homepage=recipe.homepage,
        version=version,
        license=recipe.license,
        caveats=split(recipe.caveats),
        dependencies=sorted(recipe.dependencies, key=lambda d: d.name),
        conflicts=recipe.conflicts,
        custom_require=recipe.custom_require,
        custom_block=split(recipe.custom_block),
        post_install=split(recipe.post_install),
        service=split(recipe.service),
        tests=split(recipe.test),
        macos_packages=_sorted_packages(macos),
        linux_packages=_sorted_packages(linux),
        has_only_amd64_macos_pkg=len(macos) == 1 and macos[0].arch == "amd64",
    )
