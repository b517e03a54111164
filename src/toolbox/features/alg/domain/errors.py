"""Errors raised by the search and sort routines."""

from __future__ import annotations

from toolbox.shared.errors import ToolboxError


class EmptyInputError(ToolboxError, ValueError):
    """Raised when an operation needs at least one element and got none."""


__all__ = ["EmptyInputError"]
