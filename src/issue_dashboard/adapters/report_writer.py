"""Persist the rendered dashboard document."""

from __future__ import annotations

from pathlib import Path

from issue_dashboard.errors import PersistenceFailed


def write_report(content: str, path: str | Path) -> Path:
    """Overwrite ``path`` with ``content`` and return the resolved path.

    The parent directory is created when missing.
    """
    output_path = Path(path).resolve()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise PersistenceFailed(f"Failed to write report to {output_path}: {exc}") from exc
    return output_path
