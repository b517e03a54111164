"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the library logger, its setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path for every feature module.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, reset_logger, setup_logger
from .handlers import PathRichHandler

__all__ = [
    "LOGGER_NAME",
    "PathRichHandler",
    "logger",
    "reset_logger",
    "setup_logger",
]
