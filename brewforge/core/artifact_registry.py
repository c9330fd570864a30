"""Append-only artifact registry.

Upstream build stages populate the registry; brewforge only queries it
and appends the formulas it renders.  There is no update or delete
operation, and appends are safe from multiple threads.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import ValidationError

from brewforge.errors import ConfigError
from brewforge.models.artifacts import Artifact

logger = logging.getLogger(__name__)

Filter = Callable[[Artifact], bool]


class ArtifactRegistry:
    """Thread-safe, append-only collection of artifacts.

    Parameters
    ----------
    artifacts:
        Initial contents, kept in the given order.
    """

    def __init__(self, artifacts: Iterable[Artifact] = ()) -> None:
        self._lock = threading.Lock()
        self._items: list[Artifact] = list(artifacts)

    # ------------------------------------------------------------------
    # Append
    # ------------------------------------------------------------------

    def add(self, artifact: Artifact) -> None:
        """Append an artifact."""
        with self._lock:
            self._items.append(artifact)
        logger.debug("registered artifact %s (%s)", artifact.name, artifact.type.value)

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def list(self) -> list[Artifact]:
        """Snapshot of every artifact, in insertion order."""
        with self._lock:
            return list(self._items)

    def filter(self, predicate: Filter) -> list[Artifact]:
        """Artifacts matching *predicate*, in insertion order."""
        return [a for a in self.list() if predicate(a)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_json(cls, path: Path | str) -> ArtifactRegistry:
        """Load a registry from an ``artifacts.json`` manifest (a JSON list)."""
        manifest = Path(path)
        try:
            payload = json.loads(manifest.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ConfigError(f"artifact manifest not found: {manifest}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON in {manifest}: {exc}") from exc

        if not isinstance(payload, list):
            raise ConfigError(f"artifact manifest must contain a JSON list: {manifest}")

        try:
            artifacts = [Artifact.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise ConfigError(f"invalid artifact in {manifest}: {exc}") from exc

        logger.info("loaded %d artifacts from %s", len(artifacts), manifest)
        return cls(artifacts)
