"""Tests for runtime settings and project file loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from brewforge.config import Settings
from brewforge.config_io import load_artifacts, load_project_config
from brewforge.errors import ConfigError
from brewforge.models.recipe import DEFAULT_COMMIT_MESSAGE


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.github_api_url == "https://api.github.com"
        assert settings.request_timeout_seconds == 30.0
        assert settings.dist is None

    def test_is_production(self):
        assert Settings(_env_file=None).is_production is False
        assert Settings(_env_file=None, environment="production").is_production is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BREWFORGE_GITHUB_TOKEN", "from-env")
        monkeypatch.setenv("BREWFORGE_DIST", "build/dist")
        settings = Settings(_env_file=None)
        assert settings.github_token == "from-env"
        assert settings.dist == Path("build/dist")


class TestLoadProjectConfig:
    def test_loads_and_defaults_recipes(self, tmp_dir):
        path = tmp_dir / ".brewforge.yaml"
        path.write_text(
            "project_name: foo\n"
            "release:\n"
            "  owner: acme\n"
            "  name: foo\n"
            "brews:\n"
            "  - repository:\n"
            "      owner: acme\n"
            "      name: homebrew-tap\n"
            "    dependencies:\n"
            "      - name: git\n"
            "        type: optional\n"
            "  - name: foo-lite\n"
            "    goarm: '7'\n"
            "    skip_upload: auto\n"
        )

        project = load_project_config(path)

        assert project.project_name == "foo"
        assert project.dist == Path("dist")
        assert project.release.owner == "acme"
        first, second = project.brews
        assert first.name == "foo"
        assert first.commit_msg_template == DEFAULT_COMMIT_MESSAGE
        assert first.dependencies[0].type == "optional"
        assert second.name == "foo-lite"
        assert second.goarm == "7"
        assert second.skip_upload == "auto"

    def test_missing_file(self, tmp_dir):
        with pytest.raises(ConfigError, match="not found"):
            load_project_config(tmp_dir / "nope.yaml")

    def test_invalid_yaml(self, tmp_dir):
        path = tmp_dir / "bad.yaml"
        path.write_text("project_name: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_project_config(path)

    def test_not_a_mapping(self, tmp_dir):
        path = tmp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_project_config(path)

    def test_validation_error(self, tmp_dir):
        path = tmp_dir / "empty.yaml"
        path.write_text("brews: []\n")
        with pytest.raises(ConfigError, match="invalid project file"):
            load_project_config(path)


class TestLoadArtifacts:
    def test_reads_manifest_from_dist(self, tmp_dir):
        (tmp_dir / "artifacts.json").write_text(
            json.dumps([{"name": "foo.zip", "path": "foo.zip", "type": "archive"}])
        )
        assert len(load_artifacts(tmp_dir)) == 1
