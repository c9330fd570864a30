"""Hosting client protocols and the repository value they operate on.

A client provides ``create_file``.  Opening pull requests is an optional
capability checked structurally with ``supports_pull_requests`` instead
of through inheritance.  Concrete clients live in
``brewforge.clients.github`` and ``brewforge.clients.git``; build them
through ``brewforge.clients.factory``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from brewforge.models.recipe import CommitAuthor, RepoRef


class Repo(BaseModel):
    """A concrete repository/branch target for a commit or pull request."""

    model_config = ConfigDict(frozen=True)

    owner: str = ""
    name: str = ""
    branch: str = ""
    git_url: str = ""
    private_key: str = ""
    ssh_command: str = ""

    @classmethod
    def from_ref(cls, ref: RepoRef) -> Repo:
        return cls(
            owner=ref.owner,
            name=ref.name,
            branch=ref.branch,
            git_url=ref.git.url,
            private_key=ref.git.private_key,
            ssh_command=ref.git.ssh_command,
        )

    def __str__(self) -> str:
        if self.owner:
            return f"{self.owner}/{self.name}"
        return self.name or self.git_url


@runtime_checkable
class Client(Protocol):
    """Base capability: commit one file to a repository."""

    def create_file(
        self,
        author: CommitAuthor,
        repo: Repo,
        content: bytes,
        path: str,
        message: str,
    ) -> None:
        """Create or update *path* in *repo* with *content* as one commit."""
        ...


@runtime_checkable
class PullRequestOpener(Protocol):
    """Optional capability: open a pull request."""

    def open_pull_request(self, base: Repo, head: Repo, title: str, draft: bool) -> None:
        """Open a pull request from *head* into *base*."""
        ...


@runtime_checkable
class ReleaseURLTemplater(Protocol):
    """Supplies the default download-URL template for released artifacts."""

    def release_url_template(self) -> str:
        ...


def supports_pull_requests(client: object) -> bool:
    """Whether *client* can open pull requests."""
    return isinstance(client, PullRequestOpener)


__all__ = [
    "Client",
    "PullRequestOpener",
    "ReleaseURLTemplater",
    "Repo",
    "supports_pull_requests",
]
