"""Plain-text run summary printed after the report is written."""

from __future__ import annotations

from issue_dashboard.core.models import DashboardReport


def render_summary(report: DashboardReport) -> str:
    summary = report.summary
    lines = [
        "Summary:",
        f"   Total Issues: {summary.total_issues}",
        f"   Open: {summary.open_issues}",
        f"   Closed: {summary.closed_issues}",
    ]
    if summary.state_breakdown:
        lines.append("   State Breakdown:")
        lines.extend(f"     {label}: {count}" for label, count in summary.state_breakdown.items())
    else:
        lines.append("   State Breakdown: (none)")
    return "\n".join(lines)
