"""Shared test fixtures for brewforge."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from brewforge.clients import Repo
from brewforge.config import Settings
from brewforge.core.artifact_registry import ArtifactRegistry
from brewforge.core.context import PipelineContext
from brewforge.models.artifacts import Artifact, ArtifactType
from brewforge.models.recipe import CommitAuthor, Recipe, RepoRef, apply_defaults
from brewforge.models.release import ReleaseContext


# ---------------------------------------------------------------------------
# Fake hosting clients
# ---------------------------------------------------------------------------


class FakeClient:
    """Records create_file calls; cannot open pull requests."""

    def __init__(self, url_template: str = "https://dl.example.com/{{ .Tag }}/{{ .ArtifactName }}") -> None:
        self.url_template = url_template
        self.files: list[dict[str, Any]] = []

    def release_url_template(self) -> str:
        return self.url_template

    def create_file(
        self,
        author: CommitAuthor,
        repo: Repo,
        content: bytes,
        path: str,
        message: str,
    ) -> None:
        self.files.append(
            {"author": author, "repo": repo, "content": content, "path": path, "message": message}
        )


class FakePRClient(FakeClient):
    """FakeClient that can also open pull requests."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.pull_requests: list[dict[str, Any]] = []

    def open_pull_request(self, base: Repo, head: Repo, title: str, draft: bool) -> None:
        self.pull_requests.append({"base": base, "head": head, "title": title, "draft": draft})


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def release() -> ReleaseContext:
    """A stable, non-prerelease release."""
    return ReleaseContext(project_name="foo", version="1.0.1", tag="v1.0.1")


@pytest.fixture
def registry() -> ArtifactRegistry:
    """Provide an empty registry."""
    return ArtifactRegistry()


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def fake_pr_client() -> FakePRClient:
    return FakePRClient()


@pytest.fixture
def client_factory() -> type[FakeClient]:
    """The fake client class, for tests that need more than one instance."""
    return FakeClient


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_artifact(tmp_dir: Path) -> Callable[..., Artifact]:
    """Factory fixture: build an Artifact backed by a real file."""

    def _factory(
        name: str = "foo_darwin_amd64.tar.gz",
        goos: str = "darwin",
        goarch: str = "amd64",
        type: ArtifactType = ArtifactType.ARCHIVE,
        content: bytes | None = None,
        **overrides: Any,
    ) -> Artifact:
        path = tmp_dir / "build" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content if content is not None else name.encode())
        defaults: dict[str, Any] = {
            "name": name,
            "path": str(path),
            "type": type,
            "goos": goos,
            "goarch": goarch,
            "goamd64": "v1" if goarch == "amd64" else "",
            "goarm": "6" if goarch == "arm" else "",
            "format": "tar.gz" if type == ArtifactType.ARCHIVE else "",
            "id": "foo",
            "extra": {"Binaries": ["foo"]} if type == ArtifactType.ARCHIVE else {},
        }
        defaults.update(overrides)
        return Artifact(**defaults)

    return _factory


@pytest.fixture
def make_recipe() -> Callable[..., Recipe]:
    """Factory fixture: build a defaulted Recipe pointing at a tap."""

    def _factory(**overrides: Any) -> Recipe:
        defaults: dict[str, Any] = {
            "name": "foo",
            "description": "A foo tool",
            "homepage": "https://example.com/foo",
            "license": "MIT",
            "repository": RepoRef(owner="acme", name="homebrew-tap"),
        }
        defaults.update(overrides)
        return apply_defaults(Recipe(**defaults), project_name="foo")

    return _factory


@pytest.fixture
def make_context(
    tmp_dir: Path,
    release: ReleaseContext,
    registry: ArtifactRegistry,
) -> Callable[..., PipelineContext]:
    """Factory fixture: build a PipelineContext writing under tmp_dir/dist."""

    def _factory(
        recipes: list[Recipe] | None = None,
        release_ctx: ReleaseContext | None = None,
        **overrides: Any,
    ) -> PipelineContext:
        defaults: dict[str, Any] = {
            "release": release_ctx or release,
            "recipes": recipes or [],
            "registry": registry,
            "dist": tmp_dir / "dist",
            "settings": Settings(_env_file=None),
        }
        defaults.update(overrides)
        return PipelineContext(**defaults)

    return _factory
