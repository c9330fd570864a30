"""Loading the project file and artifact manifest from disk."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from brewforge.core.artifact_registry import ArtifactRegistry
from brewforge.errors import ConfigError
from brewforge.models.recipe import apply_defaults
from brewforge.models.release import ProjectConfig

DEFAULT_PROJECT_FILE = ".brewforge.yaml"
ARTIFACTS_MANIFEST = "artifacts.json"


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"project file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Project file must contain a YAML mapping: {path}")
    return dict(payload)


def load_project_config(path: Path | str = DEFAULT_PROJECT_FILE) -> ProjectConfig:
    """Load and validate a project file, filling recipe defaults."""
    source = Path(path)
    payload = _load_yaml_mapping(source)
    try:
        project = ProjectConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid project file {source}: {exc}") from exc

    brews = [apply_defaults(recipe, project.project_name) for recipe in project.brews]
    return project.model_copy(update={"brews": brews})


def load_artifacts(dist: Path | str) -> ArtifactRegistry:
    """Load ``<dist>/artifacts.json`` into a registry."""
    return ArtifactRegistry.from_json(Path(dist) / ARTIFACTS_MANIFEST)
