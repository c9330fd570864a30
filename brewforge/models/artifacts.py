"""Build artifact models (immutable once produced upstream)."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from brewforge.core.hasher import file_digest
from brewforge.errors import ArtifactExtraError

T = TypeVar("T")

# Well-known keys of the ``extra`` side channel.
EXTRA_BINARY = "Binary"
EXTRA_BINARIES = "Binaries"
EXTRA_REPLACES = "Replaces"
EXTRA_BREW_CONFIG = "BrewConfig"


class ArtifactType(str, Enum):
    """Kind of build output."""

    ARCHIVE = "archive"
    UPLOADABLE_BINARY = "uploadable_binary"
    BINARY = "binary"
    UNIVERSAL_BINARY = "universal_binary"
    FILE = "file"
    CHECKSUM = "checksum"
    FORMULA = "formula"


class Artifact(BaseModel):
    """One build output with its target platform metadata.

    ``extra`` is an open-ended side channel; read it through the typed
    accessors below rather than indexing it directly.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    type: ArtifactType
    goos: str = ""
    goarch: str = ""
    goarm: str = ""
    goamd64: str = ""
    format: str = ""
    id: str = ""
    extra: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Typed extras
    # ------------------------------------------------------------------

    def extra_as(self, key: str, expected: type[T]) -> T:
        """Return ``extra[key]`` as *expected*.

        Mappings are validated into Pydantic models when *expected* is a
        model class, so extras that went through JSON come back typed.
        Raises ``ArtifactExtraError`` when the key is absent or the value
        does not fit.
        """
        if key not in self.extra:
            raise ArtifactExtraError(f"artifact {self.name!r} has no extra {key!r}")
        return _coerce(self.name, key, self.extra[key], expected)

    def extra_or(self, key: str, default: T) -> T:
        """Return ``extra[key]`` typed like *default*, or *default* if absent."""
        if key not in self.extra:
            return default
        return _coerce(self.name, key, self.extra[key], type(default))

    def binary_name(self) -> str:
        return self.extra_or(EXTRA_BINARY, self.name)

    def bundled_binaries(self) -> list[str]:
        binaries = self.extra_or(EXTRA_BINARIES, [])
        for item in binaries:
            if not isinstance(item, str):
                raise ArtifactExtraError(
                    f"artifact {self.name!r}: extra {EXTRA_BINARIES!r} must be a list of strings"
                )
        return binaries

    def replaces(self) -> bool:
        return self.extra_or(EXTRA_REPLACES, False)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def checksum(self, algorithm: str = "sha256") -> str:
        """Hex digest of the artifact file."""
        return file_digest(self.path, algorithm)


def _coerce(name: str, key: str, value: Any, expected: type[T]) -> T:
    if isinstance(value, expected):
        return value
    if isinstance(expected, type) and issubclass(expected, BaseModel) and isinstance(value, dict):
        try:
            return expected.model_validate(value)
        except ValidationError as exc:
            raise ArtifactExtraError(
                f"artifact {name!r}: extra {key!r} is not a valid {expected.__name__}: {exc}"
            ) from exc
    raise ArtifactExtraError(
        f"artifact {name!r}: extra {key!r} is {type(value).__name__}, "
        f"expected {expected.__name__}"
    )
