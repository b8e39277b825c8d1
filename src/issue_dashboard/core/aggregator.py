"""Pull-request filtering, issue projection and summary counting."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, Callable

from issue_dashboard.core.models import DashboardReport, Issue, ReportSummary

STATE_LABEL_PREFIX = "state:"
PULL_REQUEST_MARKER = "pull_request"


def is_pull_request(item: Mapping[str, Any]) -> bool:
    """Return True when the raw item is a pull request rather than an issue."""
    return PULL_REQUEST_MARKER in item


def project_issue(item: Mapping[str, Any]) -> Issue:
    """Build an Issue from a raw API item, flattening labels to their names."""
    return Issue(
        number=item["number"],
        title=item["title"],
        state=item["state"],
        labels=tuple(_label_name(label) for label in item.get("labels") or ()),
        created_at=item["created_at"],
        updated_at=item["updated_at"],
    )


def aggregate(
    items: Iterable[Mapping[str, Any]],
    repository: str,
    *,
    now_fn: Callable[[], datetime] | None = None,
) -> DashboardReport:
    """Summarize raw API items into a dashboard report.

    Pull requests are dropped before projection and never contribute to any
    count. ``state_breakdown`` keeps labels in first-seen order. States other
    than ``open`` and ``closed`` only count towards the total.

    Args:
        items: Raw issue objects in API order.
        repository: ``owner/name`` identifier recorded in the report.
        now_fn: Clock used for ``generated_at`` (default: current UTC time).
    """
    generated_at = (now_fn or _utc_now)()

    issues: list[Issue] = []
    state_breakdown: dict[str, int] = {}
    open_issues = 0
    closed_issues = 0

    for item in items:
        if is_pull_request(item):
            continue
        issue = project_issue(item)
        issues.append(issue)

        for label in issue.labels:
            if label.startswith(STATE_LABEL_PREFIX):
                state_breakdown[label] = state_breakdown.get(label, 0) + 1

        if issue.state == "open":
            open_issues += 1
        elif issue.state == "closed":
            closed_issues += 1

    return DashboardReport(
        generated_at=format_timestamp(generated_at),
        repository=repository,
        summary=ReportSummary(
            total_issues=len(issues),
            open_issues=open_issues,
            closed_issues=closed_issues,
            state_breakdown=state_breakdown,
        ),
        issues=tuple(issues),
    )


def format_timestamp(moment: datetime) -> str:
    """Encode a datetime as UTC ISO-8601 with millisecond precision, e.g. 2024-01-02T03:04:05.678Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _label_name(label: Any) -> str:
    if isinstance(label, Mapping):
        return str(label.get("name", ""))
    return str(label)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
