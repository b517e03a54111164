"""Where: src/toolbox/config/settings.py
What: Derived runtime settings sourced from the loaded configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

import logging
from pathlib import Path

from toolbox.config.config import ESCAPE_POLICIES, ConfigError, config as app_config
from toolbox.config.paths import default_log_file
from toolbox.platform.logging import setup_logger

# Virtual file system ---------------------------------------------------------

# Parsed into an EscapePolicy by the VFS; kept as text so config does not
# depend on feature packages.
_escape_policy = app_config.vfs_escape_policy.strip().lower() or "deny"
if _escape_policy not in ESCAPE_POLICIES:
    raise ConfigError(f"Unknown escape policy '{app_config.vfs_escape_policy}'")
VFS_ESCAPE_POLICY: str = _escape_policy

VFS_CREATE_ROOT: bool = bool(app_config.vfs_create_root)


# Logging ---------------------------------------------------------------------

_console_level = logging.getLevelNamesMapping().get(app_config.log_console_level.strip().upper())
if _console_level is None:
    raise ConfigError(f"Unknown log level '{app_config.log_console_level}'")
LOG_CONSOLE_LEVEL: int = _console_level

LOG_FILE: Path | None = (app_config.log_file or default_log_file()) if app_config.log_to_file else None


def configure_logging() -> logging.Logger:
    """Apply the logging section of the configuration to the ``toolbox`` logger."""

    return setup_logger(log_file=LOG_FILE, console_level=LOG_CONSOLE_LEVEL)


__all__ = [
    "LOG_CONSOLE_LEVEL",
    "LOG_FILE",
    "VFS_CREATE_ROOT",
    "VFS_ESCAPE_POLICY",
    "configure_logging",
]
