"""
Summary: Root of the toolbox exception hierarchy.
Why: Let callers catch every library failure with a single except clause.
"""

from __future__ import annotations


class ToolboxError(Exception):
    """Base class for all errors raised by toolbox."""


__all__ = ["ToolboxError"]
