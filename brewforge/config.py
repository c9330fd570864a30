"""Runtime settings — env-driven.

Reads from a ``.env`` file and ``BREWFORGE_*`` environment variables.
Project-level configuration (recipes, dist directory) lives in the
project file instead; see ``brewforge.config_io``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BREWFORGE_LOG_LEVEL=DEBUG
        export BREWFORGE_GITHUB_TOKEN=ghp_...
        export BREWFORGE_DIST=build/dist
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BREWFORGE_",
        env_file_encoding="utf-8",
    )

    environment: str = "development"
    log_level: str = "INFO"

    # Where artifacts.json lives and formulas are written; overrides the
    # project file's ``dist`` when set.
    dist: Path | None = None

    # Hosting API
    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    github_download_url: str = "https://github.com"
    request_timeout_seconds: float = 30.0

    # Generic git transport
    git_binary: str = "git"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


# Module-level singleton; import as `from brewforge.config import settings`
settings = Settings()
