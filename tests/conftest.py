"""Shared fixtures for issue_dashboard test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from issue_dashboard.core.models import DashboardConfig


def _make_raw_issue(
    number: int,
    *,
    state: str = "open",
    labels: tuple[str, ...] = (),
    pull_request: bool = False,
) -> dict[str, Any]:
    """Build a raw item shaped like the GitHub issues listing payload."""
    item: dict[str, Any] = {
        "number": number,
        "title": f"Issue {number}",
        "state": state,
        "labels": [{"id": index, "name": name, "color": "ededed"} for index, name in enumerate(labels)],
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "body": "Body",
    }
    if pull_request:
        item["pull_request"] = {"url": f"https://api.github.com/repos/acme/repo/pulls/{number}"}
    return item


@pytest.fixture
def sample_config() -> DashboardConfig:
    """A valid DashboardConfig for use in tests."""
    return DashboardConfig(token="test-token", repository="acme/repo")


@pytest.fixture
def make_raw_issue() -> Callable[..., dict[str, Any]]:
    """Factory for raw GitHub issue items."""
    return _make_raw_issue
