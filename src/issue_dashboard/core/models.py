"""Pydantic configuration model and report dataclasses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_OUTPUT_PATH = "docs/dashboard-data.json"


def split_repository(repository: str) -> tuple[str, str]:
    """Split an ``owner/name`` identifier into its two segments.

    Raises ValueError unless there are exactly two non-empty segments.
    """
    parts = repository.split("/")
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise ValueError(f"repository must look like 'owner/name', got {repository!r}")
    owner, name = (part.strip() for part in parts)
    return owner, name


# ---------------------------------------------------------------------------
# Pydantic config model (input validation)
# ---------------------------------------------------------------------------


class DashboardConfig(BaseModel):
    """Explicit configuration for one dashboard run."""

    model_config = ConfigDict(extra="forbid")

    token: NonEmptyStr
    repository: NonEmptyStr
    api_url: NonEmptyStr = DEFAULT_API_URL
    output_path: NonEmptyStr = DEFAULT_OUTPUT_PATH
    timeout_seconds: Optional[Annotated[float, Field(gt=0)]] = None

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, value: str) -> str:
        owner, name = split_repository(value)
        return f"{owner}/{name}"

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


# ---------------------------------------------------------------------------
# Report dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Issue:
    """Stable-shaped issue row projected from a raw API item."""

    number: int
    title: str
    state: str
    labels: tuple[str, ...]
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ReportSummary:
    """Issue counts for one repository."""

    total_issues: int
    open_issues: int
    closed_issues: int
    state_breakdown: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class DashboardReport:
    """Aggregated dashboard document."""

    generated_at: str
    repository: str
    summary: ReportSummary
    issues: tuple[Issue, ...] = ()
