"""
Summary: Split raw path strings into an anchor and separator-free segments.
Why: Confine drive, UNC and separator conventions to one host-agnostic function.
"""

# Both ``/`` and ``\`` count as separators on every host, and ``X:`` is read
# as a drive prefix everywhere, so the same string splits identically on
# POSIX and Windows.

from __future__ import annotations

import os
import re
from pathlib import PureWindowsPath
from typing import Final

SEPARATORS: Final[str] = "/\\"

_SEPARATOR_RUN: Final[re.Pattern[str]] = re.compile(r"[\\/]+")
_WINDOWS_ANCHOR: Final[re.Pattern[str]] = re.compile(r"^(?:[A-Za-z]:|[\\/]{2}[^\\/])")
_DRIVE_PREFIX: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:")


def split_native(raw: str | os.PathLike[str]) -> tuple[str, list[str]]:
    """Split ``raw`` into ``(anchor, segments)``.

    The anchor is ``""`` for relative input, the leading separator for
    root-anchored input (``/etc``, ``\\etc``), the drive for drive paths
    (``C:\\``, ``C:``) and ``\\\\server\\share\\`` for UNC paths. Segments never
    contain separators or empty strings; ``.`` and ``..`` are kept verbatim.

    Example:
        split_native("a//b\\\\c")        # ("", ["a", "b", "c"])
        split_native("C:/data\\\\x")     # ("C:\\\\", ["data", "x"])
    """
    text = os.fspath(raw)
    anchor = ""
    if _WINDOWS_ANCHOR.match(text):
        anchor = PureWindowsPath(text).anchor
    elif text[:1] and text[0] in SEPARATORS:
        anchor = text[0]

    remainder = text[len(anchor):] if anchor else text
    segments = [segment for segment in _SEPARATOR_RUN.split(remainder) if segment]
    return anchor, segments


def has_drive(segment: str) -> bool:
    """Return True when a single segment starts with a drive such as ``C:``."""
    return _DRIVE_PREFIX.match(segment) is not None


__all__ = ["SEPARATORS", "has_drive", "split_native"]
