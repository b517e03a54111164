# Where: toolbox.shared.__init__
# What: Provide a concise import surface for cross-feature helpers.
# Why: Keep feature packages from reaching into each other's modules.

"""Shared cross-cutting utilities exposed at the package level."""

from .errors import ToolboxError

__all__ = ["ToolboxError"]
