"""Generate dashboard data from GitHub issues."""

from issue_dashboard.version import __version__

__all__ = ["__version__"]
