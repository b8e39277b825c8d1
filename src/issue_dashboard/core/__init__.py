"""Core report models and aggregation."""

from issue_dashboard.core.aggregator import (
    STATE_LABEL_PREFIX,
    aggregate,
    format_timestamp,
    is_pull_request,
    project_issue,
)
from issue_dashboard.core.models import (
    DashboardConfig,
    DashboardReport,
    Issue,
    ReportSummary,
    split_repository,
)

__all__ = [
    "STATE_LABEL_PREFIX",
    "DashboardConfig",
    "DashboardReport",
    "Issue",
    "ReportSummary",
    "aggregate",
    "format_timestamp",
    "is_pull_request",
    "project_issue",
    "split_repository",
]
