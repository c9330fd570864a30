"""Formula rendering models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from brewforge.models.recipe import Dependency


class ReleasePackage(BaseModel):
    """Everything the template needs to emit one downloadable package."""

    model_config = ConfigDict(frozen=True)

    download_url: str
    sha256: str
    os: str
    arch: str
    download_strategy: str = ""
    install: list[str] = []


class FormulaRenderContext(BaseModel):
    """Input of the structural formula template.

    At most one package per (os, arch) pair exists across both lists;
    the assembler fails before constructing a context that would break
    this.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    desc: str = ""
    homepage: str = ""
    version: str = ""
    license: str = ""
    caveats: list[str] = []
    dependencies: list[Dependency] = []
    conflicts: list[str] = []
    custom_require: str = ""
    custom_block: list[str] = []
    post_install: list[str] = []
    service: list[str] = []
    tests: list[str] = []
    macos_packages: list[ReleasePackage] = []
    linux_packages: list[ReleasePackage] = []
    has_only_amd64_macos_pkg: bool = False
