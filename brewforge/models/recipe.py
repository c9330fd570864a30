"""Recipe models — the declarative ``brews[]`` section of a project file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

DEFAULT_COMMIT_MESSAGE = "Brew formula update for {{ .ProjectName }} version {{ .Tag }}"
DEFAULT_GOARM = "6"
DEFAULT_GOAMD64 = "v1"
DEFAULT_AUTHOR_NAME = "brewforgebot"
DEFAULT_AUTHOR_EMAIL = "bot@brewforge.dev"


class CommitAuthor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""


class GitRepoRef(BaseModel):
    """A repository reachable over plain git, bypassing any hosting API."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    private_key: str = ""
    ssh_command: str = ""


class PullRequestBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str = ""
    name: str = ""
    branch: str = ""


class PullRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    draft: bool = False
    base: PullRequestBase = PullRequestBase()


class RepoRef(BaseModel):
    """Where the formula is published (the tap)."""

    model_config = ConfigDict(frozen=True)

    owner: str = ""
    name: str = ""
    token: str = ""
    branch: str = ""
    git: GitRepoRef = GitRepoRef()
    pull_request: PullRequest = PullRequest()


class Dependency(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""
    version: str = ""


class Recipe(BaseModel):
    """Configuration for one Homebrew formula.

    String fields may contain ``{{ .Field }}`` placeholders; they are
    resolved either while the formula is assembled (per artifact) or in
    the final substitution pass over the rendered text.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    folder: str = ""
    description: str = ""
    homepage: str = ""
    license: str = ""
    repository: RepoRef = RepoRef()
    commit_author: CommitAuthor = CommitAuthor()
    commit_msg_template: str = ""
    url_template: str = ""
    download_strategy: str = ""
    custom_require: str = ""
    custom_block: str = ""
    dependencies: list[Dependency] = []
    conflicts: list[str] = []
    caveats: str = ""
    install: str = ""
    extra_install: str = ""
    post_install: str = ""
    test: str = ""
    service: str = ""
    skip_upload: str = ""
    ids: list[str] = []
    goarm: str = ""
    goamd64: str = ""


class ResolvedRecipe(Recipe):
    """A recipe whose name, repository and skip policy are final strings.

    Produced by ``brewforge.formula.run.resolve_recipe``; this is the value
    stored on the formula artifact and read back by the publisher.
    """


def apply_defaults(recipe: Recipe, project_name: str) -> Recipe:
    """Fill unset fields with their defaults, returning a new recipe."""
    author = recipe.commit_author
    return recipe.model_copy(
        update={
            "name": recipe.name or project_name,
            "commit_msg_template": recipe.commit_msg_template or DEFAULT_COMMIT_MESSAGE,
            "goarm": recipe.goarm or DEFAULT_GOARM,
            "goamd64": recipe.goamd64 or DEFAULT_GOAMD64,
            "commit_author": CommitAuthor(
                name=author.name or DEFAULT_AUTHOR_NAME,
                email=author.email or DEFAULT_AUTHOR_EMAIL,
            ),
        }
    )
