"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from issue_dashboard.adapters.config_loader import load_config
from issue_dashboard.core.models import DEFAULT_API_URL, DEFAULT_OUTPUT_PATH
from issue_dashboard.errors import ConfigurationError, MissingConfiguration

VALID_ENV = {"GITHUB_TOKEN": "env-token", "GITHUB_REPOSITORY": "acme/repo"}


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    return path


def test_load_config_from_environment_uses_defaults() -> None:
    config = load_config(environ=VALID_ENV)

    assert config.token == "env-token"
    assert config.repository == "acme/repo"
    assert config.api_url == DEFAULT_API_URL
    assert config.output_path == DEFAULT_OUTPUT_PATH
    assert config.timeout_seconds is None


def test_missing_token_has_specific_message() -> None:
    with pytest.raises(MissingConfiguration, match="GITHUB_TOKEN environment variable is required"):
        load_config(environ={"GITHUB_REPOSITORY": "acme/repo"})


def test_missing_repository_has_specific_message() -> None:
    with pytest.raises(MissingConfiguration, match="GITHUB_REPOSITORY environment variable is required"):
        load_config(environ={"GITHUB_TOKEN": "env-token"})


def test_empty_environment_value_counts_as_missing() -> None:
    with pytest.raises(MissingConfiguration, match="GITHUB_TOKEN"):
        load_config(environ={"GITHUB_TOKEN": "", "GITHUB_REPOSITORY": "acme/repo"})


def test_whitespace_token_override_counts_as_missing() -> None:
    with pytest.raises(MissingConfiguration, match="GITHUB_TOKEN"):
        load_config(environ={"GITHUB_REPOSITORY": "acme/repo"}, overrides={"token": "   "})


def test_overrides_take_precedence_over_environment() -> None:
    config = load_config(
        environ=VALID_ENV,
        overrides={"repository": "other/project", "token": None, "output_path": "out/data.json"},
    )

    assert config.repository == "other/project"
    assert config.token == "env-token"
    assert config.output_path == "out/data.json"


@pytest.mark.parametrize("repository", ["acme", "acme/", "/repo", "a/b/c"])
def test_malformed_repository_is_configuration_error(repository: str) -> None:
    with pytest.raises(ConfigurationError, match="repository") as excinfo:
        load_config(environ={"GITHUB_TOKEN": "t", "GITHUB_REPOSITORY": repository})

    assert not isinstance(excinfo.value, MissingConfiguration)


def test_yaml_file_supplies_values_and_environment_wins(tmp_path: Path) -> None:
    config_path = _write(
        tmp_path,
        "dashboard.yaml",
        "token: file-token\nrepository: file/repo\napi_url: https://ghe.example.com/api/v3/\ntimeout_seconds: 5\n",
    )

    config = load_config(config_path, environ={"GITHUB_REPOSITORY": "acme/repo"})

    assert config.token == "file-token"
    assert config.repository == "acme/repo"
    assert config.api_url == "https://ghe.example.com/api/v3"
    assert config.timeout_seconds == pytest.approx(5.0)


def test_missing_config_file_is_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml", environ=VALID_ENV)


def test_invalid_yaml_is_configuration_error(tmp_path: Path) -> None:
    config_path = _write(tmp_path, "bad.yaml", "token: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
        load_config(config_path, environ=VALID_ENV)


def test_non_mapping_yaml_root_is_configuration_error(tmp_path: Path) -> None:
    config_path = _write(tmp_path, "list.yaml", "- a\n- b\n")

    with pytest.raises(ConfigurationError, match="root must be a YAML mapping"):
        load_config(config_path, environ=VALID_ENV)


def test_unknown_key_lists_field_in_error(tmp_path: Path) -> None:
    config_path = _write(tmp_path, "extra.yaml", "per_page: 50\n")

    with pytest.raises(ConfigurationError, match="- per_page:"):
        load_config(config_path, environ=VALID_ENV)


def test_non_positive_timeout_is_rejected(tmp_path: Path) -> None:
    config_path = _write(tmp_path, "timeout.yaml", "timeout_seconds: 0\n")

    with pytest.raises(ConfigurationError, match="timeout_seconds"):
        load_config(config_path, environ=VALID_ENV)
