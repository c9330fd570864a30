"""GitHub REST client — file commits, pull requests, release URLs."""

from __future__ import annotations

import base64
import logging
from typing import Any

import requests

from brewforge.clients import Repo
from brewforge.errors import ClientError
from brewforge.models.recipe import CommitAuthor

logger = logging.getLogger(__name__)


class GitHubClient:
    """Talks to the GitHub contents and pulls APIs.

    Parameters
    ----------
    token:
        Personal access or app token with ``contents`` (and, for pull
        requests, ``pull_requests``) write access.
    api_url:
        Base REST URL, e.g. ``https://api.github.com``.
    download_url:
        Base URL release assets are served from.
    release_repo:
        Repository the artifacts were released to; used to build the
        default download-URL template.
    timeout:
        Per-request timeout in seconds.
    session:
        Optional preconfigured ``requests.Session``.
    """

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        download_url: str = "https://github.com",
        release_repo: Repo | None = None,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._download_url = download_url.rstrip("/")
        self._release_repo = release_repo or Repo()
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/vnd.github+json"})
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    # ------------------------------------------------------------------
    # ReleaseURLTemplater
    # ------------------------------------------------------------------

    def release_url_template(self) -> str:
        repo = self._release_repo
        return (
            f"{self._download_url}/{repo.owner}/{repo.name}"
            "/releases/download/{{ .Tag }}/{{ .ArtifactName }}"
        )

    # ------------------------------------------------------------------
    # Client
    # ------------------------------------------------------------------

    def create_file(
        self,
        author: CommitAuthor,
        repo: Repo,
        content: bytes,
        path: str,
        message: str,
    ) -> None:
        url = f"{self._api_url}/repos/{repo.owner}/{repo.name}/contents/{path}"
        payload: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content).decode("ascii"),
            "committer": {"name": author.name, "email": author.email},
        }
        if repo.branch:
            payload["branch"] = repo.branch

        existing = self._existing_sha(url, repo.branch)
        if existing:
            payload["sha"] = existing

        logger.info("pushing %s to %s", path, repo)
        self._request("PUT", url, json=payload)

    def _existing_sha(self, url: str, branch: str) -> str:
        params = {"ref": branch} if branch else None
        response = self._request("GET", url, params=params, allow=(404,))
        if response.status_code == 404:
            return ""
        return response.json().get("sha", "")

    # ------------------------------------------------------------------
    # PullRequestOpener
    # ------------------------------------------------------------------

    def open_pull_request(self, base: Repo, head: Repo, title: str, draft: bool) -> None:
        target = base if base.name else head
        owner = target.owner or head.owner
        url = f"{self._api_url}/repos/{owner}/{target.name}/pulls"
        head_ref = f"{head.owner}:{head.branch}" if head.owner else head.branch
        payload: dict[str, Any] = {
            "title": title,
            "head": head_ref,
            "body": "Automated with brewforge",
            "base": base.branch or self._default_branch(owner, target.name),
            "draft": draft,
        }

        response = self._request("POST", url, json=payload)
        logger.info("pull request created: %s", response.json().get("html_url", ""))

    def _default_branch(self, owner: str, name: str) -> str:
        response = self._request("GET", f"{self._api_url}/repos/{owner}/{name}")
        return response.json().get("default_branch", "main")

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        url: str,
        allow: tuple[int, ...] = (),
        **kwargs: Any,
    ) -> requests.Response:
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.exceptions.RequestException as exc:
            raise ClientError(f"{method} {url} failed: {exc}") from exc

        if response.status_code in allow:
            return response
        if not response.ok:
            raise ClientError(
                f"{method} {url} returned {response.status_code}: {response.text.strip()}"
            )
        return response
