"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Create ``directory`` and its parents unless it already exists as a folder.

    Raises:
        NotADirectoryError: If ``directory`` exists but is not a folder.
        OSError: For any other failure reported by the host.
    """

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except FileExistsError as exc:
        raise NotADirectoryError(f"Path exists but is not a directory: {directory}") from exc
    return directory


__all__ = ["ensure_directory"]
