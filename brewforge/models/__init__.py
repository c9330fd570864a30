"""brewforge data models — all Pydantic v2, all frozen (immutable)."""

from brewforge.models.artifacts import (
    EXTRA_BINARIES,
    EXTRA_BINARY,
    EXTRA_BREW_CONFIG,
    EXTRA_REPLACES,
    Artifact,
    ArtifactType,
)
from brewforge.models.formula import FormulaRenderContext, ReleasePackage
from brewforge.models.recipe import (
    CommitAuthor,
    Dependency,
    GitRepoRef,
    PullRequest,
    PullRequestBase,
    Recipe,
    RepoRef,
    ResolvedRecipe,
    apply_defaults,
)
from brewforge.models.release import ProjectConfig, ReleaseContext, ReleaseRepo

__all__ = [
    # artifacts
    "Artifact",
    "ArtifactType",
    "EXTRA_BINARY",
    "EXTRA_BINARIES",
    "EXTRA_REPLACES",
    "EXTRA_BREW_CONFIG",
    # recipe
    "CommitAuthor",
    "Dependency",
    "GitRepoRef",
    "PullRequest",
    "PullRequestBase",
    "Recipe",
    "RepoRef",
    "ResolvedRecipe",
    "apply_defaults",
    # formula
    "FormulaRenderContext",
    "ReleasePackage",
    # release
    "ProjectConfig",
    "ReleaseContext",
    "ReleaseRepo",
]
