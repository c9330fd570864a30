"""Generic git transport — commits a file straight to a remote.

Used when a recipe's repository names a git URL; no hosting API is
involved, so pull requests are not available on this path.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path

from brewforge.clients import Repo
from brewforge.errors import ClientError
from brewforge.models.recipe import CommitAuthor

logger = logging.getLogger(__name__)


class GitUploadClient:
    """Clone, write, commit and push a single file.

    Parameters
    ----------
    branch:
        Branch to clone and push; the remote default when empty.
    git_binary:
        Path or name of the ``git`` executable.
    """

    def __init__(self, branch: str = "", git_binary: str = "git") -> None:
        self.branch = branch
        self._git = git_binary

    def create_file(
        self,
        author: CommitAuthor,
        repo: Repo,
        content: bytes,
        path: str,
        message: str,
    ) -> None:
        if not repo.git_url:
            raise ClientError("git transport requires repository.git.url")

        scratch = Path(tempfile.mkdtemp(prefix="brewforge-git-"))
        workdir = scratch / "repo"
        try:
            env = self._env(repo, scratch)
            clone = ["clone", "--quiet", "--depth", "1"]
            if self.branch:
                clone += ["--branch", self.branch]
            self._run(clone + [repo.git_url, str(workdir)], env=env)

            target = workdir / path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)

            self._run(["add", "--", path], cwd=workdir, env=env)
            self._run(
                [
                    "-c", f"user.name={author.name}",
                    "-c", f"user.email={author.email}",
                    "commit", "--quiet", "--message", message,
                    "--author", f"{author.name} <{author.email}>",
                ],
                cwd=workdir,
                env=env,
            )
            push = ["push", "--quiet", "origin"]
            push.append(f"HEAD:{self.branch}" if self.branch else "HEAD")
            logger.info("pushing %s to %s", path, repo.git_url)
            self._run(push, cwd=workdir, env=env)
        finally:
            shutil.rmtree(scratch, ignore_errors=True)

    def _env(self, repo: Repo, scratch: Path) -> dict[str, str]:
        env = dict(os.environ)
        if repo.ssh_command:
            env["GIT_SSH_COMMAND"] = repo.ssh_command
        elif repo.private_key:
            key = shlex.quote(_key_path(repo.private_key, scratch))
            env["GIT_SSH_COMMAND"] = (
                f"ssh -i {key} -o StrictHostKeyChecking=accept-new -F /dev/null"
            )
        return env

    def _run(
        self,
        argv: list[str],
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> str:
        command = [self._git, *argv]
        try:
            completed = subprocess.run(
                command,
                cwd=cwd,
                env=env,
                check=False,
                text=True,
                capture_output=True,
            )
        except OSError as exc:
            raise ClientError(f"failed to run {self._git}: {exc}") from exc
        if completed.returncode != 0:
            raise ClientError(
                f"git {_subcommand(argv)} failed ({completed.returncode}): {completed.stderr.strip()}"
            )
        return completed.stdout.strip()


def _key_path(private_key: str, scratch: Path) -> str:
    """Path to an ssh identity file for *private_key*.

    Inline key material (a PEM/OpenSSH block) is written to an
    owner-only file under *scratch*; anything else is taken as a path.
    """
    if os.path.isfile(private_key) or "-----BEGIN" not in private_key:
        return private_key
    key_file = scratch / "id_key"
    fd = os.open(key_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(private_key.strip() + "\n")
    return str(key_file)


def _subcommand(argv: list[str]) -> str:
    # Skips leading ``-c key=value`` overrides.
    args = iter(argv)
    for arg in args:
        if arg == "-c":
            next(args, None)
        elif not arg.startswith("-"):
            return arg
    return argv[0] if argv else ""
