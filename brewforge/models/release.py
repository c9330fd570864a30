"""Release and project configuration models."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from brewforge.models.recipe import Recipe

_SEMVER = re.compile(
    r"^v?\d+\.\d+\.\d+(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)


def semver_prerelease(version: str) -> str:
    """Prerelease component of a (optionally ``v``-prefixed) semver string."""
    match = _SEMVER.match(version.strip())
    if match is None:
        return ""
    return match.group("pre") or ""


class ReleaseContext(BaseModel):
    """The release being packaged: version, tag and environment.

    ``prerelease`` is the semver prerelease component (``rc.1`` in
    ``1.2.0-rc.1``); a non-empty value marks the release as a prerelease.
    When not given it is read from the tag, falling back to the version.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    version: str
    tag: str = ""
    prerelease: str = ""
    env: dict[str, str] = {}

    @model_validator(mode="before")
    @classmethod
    def _derive_prerelease(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("prerelease"):
            derived = semver_prerelease(data.get("tag") or "") or semver_prerelease(
                data.get("version") or ""
            )
            if derived:
                data = {**data, "prerelease": derived}
        return data

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease != ""


class ReleaseRepo(BaseModel):
    """The hosting repository the artifacts were released to."""

    model_config = ConfigDict(frozen=True)

    owner: str = ""
    name: str = ""


class ProjectConfig(BaseModel):
    """Top-level project file (``.brewforge.yaml``)."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    dist: Path = Path("dist")
    release: ReleaseRepo = ReleaseRepo()
    brews: list[Recipe] = []
