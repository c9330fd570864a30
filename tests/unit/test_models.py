"""Tests for the Pydantic models — artifacts, recipes, release context."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from brewforge.errors import ArtifactExtraError
from brewforge.models.artifacts import (
    EXTRA_BREW_CONFIG,
    Artifact,
    ArtifactType,
)
from brewforge.models.recipe import (
    DEFAULT_COMMIT_MESSAGE,
    CommitAuthor,
    Recipe,
    ResolvedRecipe,
    apply_defaults,
)
from brewforge.models.release import ReleaseContext, semver_prerelease


class TestArtifact:
    def test_frozen(self):
        a = Artifact(name="x", path="/tmp/x", type=ArtifactType.ARCHIVE)
        with pytest.raises(ValidationError):
            a.name = "y"

    def test_binary_name_defaults_to_artifact_name(self):
        a = Artifact(name="foo_darwin_amd64", path="/tmp/x", type=ArtifactType.UPLOADABLE_BINARY)
        assert a.binary_name() == "foo_darwin_amd64"

    def test_binary_name_from_extra(self):
        a = Artifact(
            name="foo_darwin_amd64",
            path="/tmp/x",
            type=ArtifactType.UPLOADABLE_BINARY,
            extra={"Binary": "foo"},
        )
        assert a.binary_name() == "foo"

    def test_bundled_binaries(self):
        a = Artifact(name="x", path="/tmp/x", type=ArtifactType.ARCHIVE, extra={"Binaries": ["a", "b"]})
        assert a.bundled_binaries() == ["a", "b"]

    def test_bundled_binaries_rejects_non_strings(self):
        a = Artifact(name="x", path="/tmp/x", type=ArtifactType.ARCHIVE, extra={"Binaries": ["a", 3]})
        with pytest.raises(ArtifactExtraError):
            a.bundled_binaries()

    def test_extra_type_mismatch(self):
        a = Artifact(name="x", path="/tmp/x", type=ArtifactType.ARCHIVE, extra={"Binary": 42})
        with pytest.raises(ArtifactExtraError, match="expected str"):
            a.binary_name()

    def test_replaces_defaults_false(self):
        a = Artifact(name="x", path="/tmp/x", type=ArtifactType.UNIVERSAL_BINARY)
        assert a.replaces() is False

    def test_extra_as_missing_key(self):
        a = Artifact(name="x.rb", path="/tmp/x.rb", type=ArtifactType.FORMULA)
        with pytest.raises(ArtifactExtraError, match="BrewConfig"):
            a.extra_as(EXTRA_BREW_CONFIG, ResolvedRecipe)

    def test_extra_as_validates_mapping_into_model(self):
        a = Artifact(
            name="x.rb",
            path="/tmp/x.rb",
            type=ArtifactType.FORMULA,
            extra={EXTRA_BREW_CONFIG: {"name": "foo", "skip_upload": "true"}},
        )
        recipe = a.extra_as(EXTRA_BREW_CONFIG, ResolvedRecipe)
        assert isinstance(recipe, ResolvedRecipe)
        assert recipe.skip_upload == "true"

    def test_checksum(self, make_artifact):
        a = make_artifact(content=b"abc")
        assert a.checksum() == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestRecipeDefaults:
    def test_apply_defaults_fills_unset(self):
        recipe = apply_defaults(Recipe(), project_name="foo")
        assert recipe.name == "foo"
        assert recipe.commit_msg_template == DEFAULT_COMMIT_MESSAGE
        assert recipe.goarm == "6"
        assert recipe.goamd64 == "v1"
        assert recipe.commit_author.name == "brewforgebot"
        assert recipe.commit_author.email == "bot@brewforge.dev"

    def test_apply_defaults_keeps_explicit_values(self):
        recipe = apply_defaults(
            Recipe(name="bar", goarm="7", commit_author=CommitAuthor(name="me", email="me@x")),
            project_name="foo",
        )
        assert recipe.name == "bar"
        assert recipe.goarm == "7"
        assert recipe.commit_author == CommitAuthor(name="me", email="me@x")

    def test_apply_defaults_returns_new_recipe(self):
        original = Recipe()
        apply_defaults(original, project_name="foo")
        assert original.name == ""


class TestReleaseContext:
    def test_not_prerelease_by_default(self):
        assert ReleaseContext(project_name="foo", version="1.0.0").is_prerelease is False

    def test_prerelease(self):
        release = ReleaseContext(project_name="foo", version="1.0.0-rc.1", prerelease="rc.1")
        assert release.is_prerelease is True

    def test_prerelease_read_from_tag(self):
        release = ReleaseContext(project_name="foo", version="1.2.0-rc.1", tag="v1.2.0-rc.1")
        assert release.prerelease == "rc.1"
        assert release.is_prerelease is True

    def test_prerelease_read_from_version(self):
        release = ReleaseContext(project_name="foo", version="2.0.0-beta.2+build.7")
        assert release.prerelease == "beta.2"

    def test_build_metadata_is_not_prerelease(self):
        release = ReleaseContext(project_name="foo", version="2.0.0+build.7", tag="v2.0.0+build.7")
        assert release.is_prerelease is False

    def test_explicit_prerelease_wins(self):
        release = ReleaseContext(project_name="foo", version="1.2.0-rc.1", prerelease="rc.2")
        assert release.prerelease == "rc.2"


class TestSemverPrerelease:
    @pytest.mark.parametrize(
        ("version", "expected"),
        [
            ("1.2.3", ""),
            ("v1.2.3-rc.1", "rc.1"),
            ("1.2.3-alpha-1", "alpha-1"),
            ("nightly", ""),
        ],
    )
    def test_component(self, version, expected):
        assert semver_prerelease(version) == expected
