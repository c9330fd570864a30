"""Placeholder substitution.

The formula pipeline only depends on the ``Templater`` protocol.
``ContextTemplater`` is the default engine: it resolves ``{{ .Field }}``
tokens from the release context and, when given, one artifact.

Supported fields::

    ProjectName Version Tag Prerelease Env.<NAME>
    ArtifactName ArtifactPath ArtifactID Os Arch Arm Amd64 Binary

Unknown fields raise ``TemplateError``; text outside ``{{ }}`` is left
untouched.
"""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

from brewforge.errors import TemplateError
from brewforge.models.artifacts import Artifact
from brewforge.models.release import ReleaseContext

_PLACEHOLDER = re.compile(r"\{\{\s*\.([A-Za-z_][A-Za-z0-9_]*)(?:\.([A-Za-z_][A-Za-z0-9_]*))?\s*\}\}")


@runtime_checkable
class Templater(Protocol):
    """Anything that can substitute placeholders in a string."""

    def apply(self, template: str, artifact: Artifact | None = None) -> str:
        """Return *template* with every placeholder resolved.

        Parameters
        ----------
        template:
            Text possibly containing placeholder expressions.
        artifact:
            Optional artifact whose fields become available to the
            expressions.
        """
        ...


class ContextTemplater:
    """Default ``Templater`` backed by a ``ReleaseContext``."""

    def __init__(self, release: ReleaseContext) -> None:
        self._release = release

    def fields(self, artifact: Artifact | None = None) -> dict[str, str]:
        release = self._release
        values = {
            "ProjectName": release.project_name,
            "Version": release.version,
            "Tag": release.tag,
            "Prerelease": release.prerelease,
        }
        if artifact is not None:
            values.update(
                {
                    "ArtifactName": artifact.name,
                    "ArtifactPath": artifact.path,
                    "ArtifactID": artifact.id,
                    "Os": artifact.goos,
                    "Arch": artifact.goarch,
                    "Arm": artifact.goarm,
                    "Amd64": artifact.goamd64,
                    "Binary": artifact.binary_name(),
                }
            )
        return values

    def apply(self, template: str, artifact: Artifact | None = None) -> str:
        if "{{" not in template:
            return template
        values = self.fields(artifact)

        def _replace(match: re.Match[str]) -> str:
            field, sub = match.group(1), match.group(2)
            if field == "Env" and sub is not None:
                if sub not in self._release.env:
                    raise TemplateError(f"environment variable {sub!r} is not set")
                return self._release.env[sub]
            if sub is None and field in values:
                return values[field]
            raise TemplateError(f"unknown template field {match.group(0)!r}")

        return _PLACEHOLDER.sub(_replace, template)
