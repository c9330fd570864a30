"""Integration tests — formula and publish stages run end to end.

Each scenario builds a registry, runs the formula stage and, where
relevant, the publish stage against in-memory hosting clients.
"""

from __future__ import annotations

import pytest

from brewforge.errors import AmbiguousPlatformError, PullRequestUnsupportedError, SkipError
from brewforge.formula.data import build_formula_data
from brewforge.formula.select import select_artifacts
from brewforge.models.artifacts import ArtifactType
from brewforge.models.recipe import PullRequest, RepoRef
from brewforge.models.release import ReleaseContext
from brewforge.stages import FormulaStage, PublishStage, StageExecutionError


class TestSingleMacosBinary:
    """One macOS/amd64 uploadable binary with a default recipe."""

    def test_context_and_formula(self, make_context, make_recipe, make_artifact, fake_client):
        recipe = make_recipe()
        ctx = make_context(recipes=[recipe])
        ctx.registry.add(
            make_artifact(
                "foo_darwin_amd64",
                "darwin",
                "amd64",
                type=ArtifactType.UPLOADABLE_BINARY,
                extra={"Binary": "foo"},
            )
        )

        data = build_formula_data(
            recipe,
            select_artifacts(ctx.registry, recipe),
            ctx.templater,
            fake_client,
            ctx.release.version,
        )
        assert len(data.macos_packages) == 1
        assert data.has_only_amd64_macos_pkg is True
        assert data.macos_packages[0].install == ['bin.install "foo_darwin_amd64" => "foo"']

        result = FormulaStage(fake_client).run_stage(ctx)
        (path,) = result["formulas"]
        content = open(path, encoding="utf-8").read()
        assert 'bin.install "foo_darwin_amd64" => "foo"' in content
        assert "depends_on :macos" in content
        assert "The darwin_arm64 architecture is not supported for the Foo" in content


class TestDuplicatePlatform:
    """Two macOS/arm64 archives: assembly fails before anything is written."""

    def test_fails_without_writing(self, make_context, make_recipe, make_artifact, fake_client):
        ctx = make_context(recipes=[make_recipe()])
        ctx.registry.add(make_artifact("a_darwin_arm64.tar.gz", "darwin", "arm64"))
        ctx.registry.add(make_artifact("b_darwin_arm64.tar.gz", "darwin", "arm64"))

        with pytest.raises(StageExecutionError) as exc_info:
            FormulaStage(fake_client).run_stage(ctx)

        cause = exc_info.value.__cause__
        assert isinstance(cause.__cause__, AmbiguousPlatformError)
        assert not (ctx.dist / "homebrew").exists()
        assert ctx.registry.filter(lambda a: a.type == ArtifactType.FORMULA) == []


class TestPrereleaseAutoSkip:
    """skip_upload 'auto' on a prerelease is a skip, and nothing is sent."""

    def test_skip_not_error(self, make_context, make_recipe, make_artifact, fake_pr_client):
        release = ReleaseContext(project_name="foo", version="2.0.0-beta.1", tag="v2.0.0-beta.1", prerelease="beta.1")
        ctx = make_context(recipes=[make_recipe(skip_upload="auto")], release_ctx=release)
        ctx.registry.add(make_artifact("foo_linux_amd64.tar.gz", "linux", "amd64"))

        FormulaStage(fake_pr_client).run_stage(ctx)
        with pytest.raises(SkipError, match="prerelease detected with 'auto' upload"):
            PublishStage(fake_pr_client).run_stage(ctx)

        assert fake_pr_client.files == []
        assert fake_pr_client.pull_requests == []


class TestPullRequestWithoutSupport:
    """Pull requests requested from a client that cannot open them."""

    def test_capability_error(self, make_context, make_recipe, make_artifact, fake_client):
        recipe = make_recipe(
            repository=RepoRef(owner="acme", name="homebrew-tap", pull_request=PullRequest(enabled=True))
        )
        ctx = make_context(recipes=[recipe])
        ctx.registry.add(make_artifact())

        FormulaStage(fake_client).run_stage(ctx)
        with pytest.raises(StageExecutionError) as exc_info:
            PublishStage(fake_client).run_stage(ctx)

        cause = exc_info.value.__cause__
        assert cause.recipe == "foo"
        assert isinstance(cause.__cause__, PullRequestUnsupportedError)
        assert fake_client.files == []


class TestFullRelease:
    """Every supported platform, rendered and published through a PR-capable client."""

    def test_all_platforms(self, make_context, make_recipe, make_artifact, fake_pr_client):
        ctx = make_context(recipes=[make_recipe(folder="Formula")])
        for goos, goarch in [
            ("darwin", "amd64"),
            ("darwin", "arm64"),
            ("linux", "amd64"),
            ("linux", "arm64"),
            ("linux", "arm"),
            ("windows", "amd64"),
        ]:
            ctx.registry.add(make_artifact(f"foo_{goos}_{goarch}.tar.gz", goos, goarch))

        FormulaStage(fake_pr_client).run_stage(ctx)
        result = PublishStage(fake_pr_client).run_stage(ctx)

        assert result["published"] == ["foo.rb"]
        (call,) = fake_pr_client.files
        assert call["path"] == "Formula/foo.rb"
        content = call["content"].decode()
        assert "on_macos do" in content
        assert "on_linux do" in content
        assert "depends_on :" not in content
        assert "foo_windows_amd64" not in content
        assert fake_pr_client.pull_requests == []
