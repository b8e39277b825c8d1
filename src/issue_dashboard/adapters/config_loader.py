"""Configuration loader: YAML file, environment and CLI overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from issue_dashboard.core.models import DashboardConfig
from issue_dashboard.errors import ConfigurationError, MissingConfiguration

TOKEN_ENV = "GITHUB_TOKEN"
REPOSITORY_ENV = "GITHUB_REPOSITORY"
API_URL_ENV = "GITHUB_API_URL"

_ENV_FIELDS = {
    "token": TOKEN_ENV,
    "repository": REPOSITORY_ENV,
    "api_url": API_URL_ENV,
}

_MISSING_MESSAGES = {
    "token": f"{TOKEN_ENV} environment variable is required",
    "repository": f"{REPOSITORY_ENV} environment variable is required",
}


def load_config(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> DashboardConfig:
    """Build a validated DashboardConfig.

    Sources, lowest precedence first: the optional YAML file at ``path``,
    the environment (``GITHUB_TOKEN``, ``GITHUB_REPOSITORY``,
    ``GITHUB_API_URL``) and ``overrides``. ``None`` and empty values never
    override.

    Raises:
        MissingConfiguration: token or repository is absent from every source.
        ConfigurationError: the file cannot be read or a value is invalid.
    """
    environ = os.environ if environ is None else environ

    raw_data: dict[str, Any] = {}
    if path is not None:
        raw_data.update(_read_config_file(Path(path)))
    for field_name, env_name in _ENV_FIELDS.items():
        value = environ.get(env_name)
        if value:
            raw_data[field_name] = value
    for field_name, value in (overrides or {}).items():
        if value is not None and value != "":
            raw_data[field_name] = value

    for field_name, message in _MISSING_MESSAGES.items():
        value = raw_data.get(field_name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingConfiguration(message)

    try:
        return DashboardConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration:\n{_format_validation_errors(exc)}") from exc


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw_data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse YAML config at {config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Failed to read config file {config_path}: {exc}") from exc

    if raw_data is None:
        return {}
    if not isinstance(raw_data, dict):
        raise ConfigurationError(f"Invalid config file at {config_path}: root must be a YAML mapping")
    return raw_data


def _format_validation_errors(exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        details.append(f"{location}: {error['msg']}")
    return "\n".join(f"- {line}" for line in details)
