"""JSON report renderer."""

from __future__ import annotations

import json
from typing import Any

from issue_dashboard.core.models import DashboardReport, Issue


def render_json_report(report: DashboardReport) -> str:
    """Render a dashboard report as two-space indented JSON."""
    payload = build_payload(report)
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def build_payload(report: DashboardReport) -> dict[str, Any]:
    """Return the JSON-ready document consumed by the dashboard page."""
    return {
        "generatedAt": report.generated_at,
        "repository": report.repository,
        "summary": {
            "totalIssues": report.summary.total_issues,
            "openIssues": report.summary.open_issues,
            "closedIssues": report.summary.closed_issues,
            "stateBreakdown": dict(report.summary.state_breakdown),
        },
        "issues": [_issue_payload(issue) for issue in report.issues],
    }


def _issue_payload(issue: Issue) -> dict[str, Any]:
    return {
        "number": issue.number,
        "title": issue.title,
        "state": issue.state,
        "labels": list(issue.labels),
        "created_at": issue.created_at,
        "updated_at": issue.updated_at,
    }
