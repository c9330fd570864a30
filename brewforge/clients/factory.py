"""Client construction keyed by transport kind."""

from __future__ import annotations

from enum import Enum

from brewforge.clients import Client, Repo
from brewforge.clients.git import GitUploadClient
from brewforge.clients.github import GitHubClient
from brewforge.config import Settings


class ClientKind(str, Enum):
    """How a repository is reached."""

    GITHUB = "github"
    GIT = "git"


def new_client(
    kind: ClientKind,
    settings: Settings,
    token: str = "",
    release_repo: Repo | None = None,
    branch: str = "",
) -> Client:
    """Build a client for *kind*.

    ``token`` falls back to ``settings.github_token`` for API clients;
    ``branch`` only applies to the git transport.
    """
    if kind == ClientKind.GITHUB:
        return GitHubClient(
            token=token or settings.github_token,
            api_url=settings.github_api_url,
            download_url=settings.github_download_url,
            release_repo=release_repo,
            timeout=settings.request_timeout_seconds,
        )
    if kind == ClientKind.GIT:
        return GitUploadClient(branch=branch, git_binary=settings.git_binary)
    raise ValueError(f"Unknown client kind {kind!r}")


def new_if_token(client: Client, token: str, settings: Settings) -> Client:
    """Reuse *client* unless a recipe-specific *token* asks for a new one."""
    if not token:
        return client
    return new_client(ClientKind.GITHUB, settings, token=token)


def new_git_upload_client(repo: Repo, settings: Settings) -> Client:
    return new_client(ClientKind.GIT, settings, branch=repo.branch)
