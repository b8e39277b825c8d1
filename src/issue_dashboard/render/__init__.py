"""Output rendering modules."""

from issue_dashboard.render.json_report import build_payload, render_json_report
from issue_dashboard.render.summary_report import render_summary

__all__ = [
    "build_payload",
    "render_json_report",
    "render_summary",
]
