"""Typer application entrypoint."""

import logging
from typing import Optional

import typer

from issue_dashboard.cli.commands.generate import run as run_generate
from issue_dashboard.version import __version__

LOG_FORMAT = "%(levelname)s: %(message)s"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Summarize GitHub issues into a static dashboard data file.",
)


def configure_logging(verbose: bool) -> None:
    """Route ``issue_dashboard`` log records to stderr; DEBUG when verbose, WARNING otherwise."""
    package_logger = logging.getLogger("issue_dashboard")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _show_version(value: bool) -> None:
    if not value:
        return
    typer.echo(f"issue-dashboard {__version__}")
    raise typer.Exit()


@app.callback()
def _global_options(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log each page request and the fetch totals."
    ),
    version: Optional[bool] = typer.Option(  # noqa: ARG001
        None,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Options shared by every issue-dashboard command."""
    configure_logging(verbose)


app.command("generate")(run_generate)


def main() -> None:
    """Run the CLI app."""
    app()


if __name__ == "__main__":
    main()
