"""Error types raised while generating dashboard data."""

from __future__ import annotations


class DashboardError(RuntimeError):
    """Base class for failures that abort a dashboard run."""


class ConfigurationError(DashboardError):
    """Raised when the run configuration is invalid."""


class MissingConfiguration(ConfigurationError):
    """Raised when a required configuration value is absent."""


class FetchFailed(DashboardError):
    """Raised when issue retrieval from GitHub fails."""


class PersistenceFailed(DashboardError):
    """Raised when the report document cannot be written."""
