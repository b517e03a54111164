"""Locations of the configuration and log files.

Both live below the root of the project that uses the library, found by
walking up from the current working directory:

- Config: ``<project_root>/config/toolbox.toml`` unless ``TOOLBOX_CONFIG``
  names another file.
- Logs: ``<project_root>/logs/toolbox.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


CONFIG_ENV_VAR: Final[str] = "TOOLBOX_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def env_path(name: str, env: Mapping[str, str] | None = None) -> Path | None:
    """Return the path stored in environment variable ``name``; blank values count as unset."""

    raw = (os.environ if env is None else env).get(name, "").strip()
    return Path(raw).expanduser().resolve() if raw else None


def find_project_root(start: Path | None = None) -> Path:
    """Return the nearest directory at or above ``start`` holding a root marker.

    Args:
        start: Directory to begin from. Defaults to the current working directory.

    Returns:
        Path: The first directory containing ``pyproject.toml`` or ``.git``,
        or ``start`` itself when no parent has one.
    """
    origin = (start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return origin


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    return env_path(CONFIG_ENV_VAR, env) or (find_project_root() / "config" / "toolbox.toml").resolve()


def default_log_dir() -> Path:
    return (find_project_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / "toolbox.log"


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "env_path",
    "find_project_root",
]
