"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Own the shared ``toolbox`` logger and attach handlers on request.
Why: Importing the library stays silent; applications opt into console output.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import PathRichHandler


LOGGER_NAME: Final[str] = "toolbox"
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3


def _replace_handlers(target: logging.Logger, handlers: list[logging.Handler]) -> None:
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()
    for handler in handlers:
        target.addHandler(handler)


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    resolved = Path(log_file).expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a rich console handler, and optionally a rotating file, to ``toolbox``.

    Replaces any handlers installed earlier. Nothing calls this at import
    time; applications call it directly or through ``configure_logging``.

    Args:
        log_file: Path to a rotating log file. If None, only the console is used.
        console_level: Logging level for console output.
        file_level: Logging level for file output.
        console: Rich console to write to. Defaults to stderr.

    Returns:
        logging.Logger: The configured ``toolbox`` logger.
    """
    handler = PathRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    handler.setLevel(console_level)
    handlers: list[logging.Handler] = [handler]
    levels = [console_level]
    if log_file is not None:
        handlers.append(_file_handler(log_file, file_level))
        levels.append(file_level)

    _replace_handlers(logger, handlers)
    logger.setLevel(min(levels))
    return logger


def reset_logger() -> logging.Logger:
    """Drop installed handlers and return to the silent import-time state."""
    _replace_handlers(logger, [logging.NullHandler()])
    logger.setLevel(logging.NOTSET)
    return logger


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


__all__ = ["LOGGER_NAME", "logger", "reset_logger", "setup_logger"]
