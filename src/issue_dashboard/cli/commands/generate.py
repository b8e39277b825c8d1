"""Generate command — fetch, aggregate and write dashboard data."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from issue_dashboard.adapters.config_loader import load_config
from issue_dashboard.adapters.github_rest import GitHubRestFetcher
from issue_dashboard.adapters.report_writer import write_report
from issue_dashboard.core import aggregate
from issue_dashboard.errors import (
    ConfigurationError,
    FetchFailed,
    MissingConfiguration,
    PersistenceFailed,
)
from issue_dashboard.render import render_json_report, render_summary

logger = logging.getLogger("issue_dashboard")


def run(
    repo: Optional[str] = typer.Option(
        None, "--repo", "-r", help="GitHub repo (owner/name). Defaults to $GITHUB_REPOSITORY."
    ),
    token: Optional[str] = typer.Option(
        None, "--token", help="GitHub token. Defaults to $GITHUB_TOKEN."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output JSON path (default: docs/dashboard-data.json)."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML."
    ),
    api_url: Optional[str] = typer.Option(
        None, "--api-url", help="GitHub API base URL. Defaults to $GITHUB_API_URL or https://api.github.com."
    ),
) -> None:
    """Fetch all issues of a repository and write the dashboard data file."""
    # --- Load config ---
    try:
        cfg = load_config(
            config,
            overrides={
                "token": token,
                "repository": repo,
                "api_url": api_url,
                "output_path": str(output) if output is not None else None,
            },
        )
    except MissingConfiguration as exc:
        _error(str(exc), 1)
    except ConfigurationError as exc:
        _error(f"Config validation error: {exc}", 1)

    typer.echo("Starting dashboard data generation...")

    # --- Fetch ---
    typer.echo(f"Fetching issues from {cfg.repository}...")
    try:
        items = GitHubRestFetcher(cfg).fetch_issues(cfg.repository)
    except FetchFailed as exc:
        _error(str(exc), 1)
    except ConfigurationError as exc:
        _error(f"Config validation error: {exc}", 1)
    typer.echo(f"Fetched {len(items)} issues")

    # --- Aggregate ---
    report = aggregate(items, cfg.repository)
    logger.debug(
        "Kept %d of %d items after dropping pull requests",
        report.summary.total_issues,
        len(items),
    )

    # --- Output ---
    try:
        written = write_report(render_json_report(report), cfg.output_path)
    except PersistenceFailed as exc:
        _error(str(exc), 1)

    typer.echo(f"Dashboard data written to: {written}")
    typer.echo(render_summary(report))


def _error(message: str, exit_code: int) -> NoReturn:
    """Print error to stderr and exit."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=exit_code)
