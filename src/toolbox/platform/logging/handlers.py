"""Rich console handler for virtual file system events.

Where: platform/logging/handlers.py
What: Render structured ``vfs_event`` log records with compact, coloured paths.
Why: Keep path-heavy debug output readable when roots are deeply nested.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that shortens paths and styles VFS events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "vfs.root": ("📁", "cyan", "Root"),
        "vfs.resolve": ("🔎", "blue", "Resolved"),
        "vfs.create_dir": ("📦", "magenta", "Created"),
        "vfs.with_root": ("🔀", "green", "Rerooted"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format ``path`` relative to ``base`` when possible, eliding long prefixes.

        Args:
            path: Absolute or relative path string.
            base: Optional directory used to relativize ``path``.

        Returns:
            Text: Styled path with magenta separators and ``…`` for dropped segments.
        """
        display_path = self._to_pure_path(path)
        if base:
            base_path = self._to_pure_path(base)
            if display_path.is_relative_to(base_path):
                relative_path = display_path.relative_to(base_path)
                if str(relative_path) not in {"", "."}:
                    display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body = body[-self._PATH_SEGMENT_LIMIT:]

        head = ""
        if anchor:
            head = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            head += "…" + separator
        rendered = head + separator.join(body)
        return self._style_path(rendered or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Pick the path flavour from the separators present in ``raw_path``."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_vfs_message(self, record: logging.LogRecord) -> Text | None:
        """Render records carrying a ``vfs_event`` extra; other records fall through."""

        event = getattr(record, "vfs_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._EVENT_STYLES.get(event, ("ℹ️", "blue", event))
        root = getattr(record, "root", None)
        target = getattr(record, "target", None)
        requested = getattr(record, "requested", None)

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(label, style=Style(color=color))
        if requested:
            _ = text.append(f" {requested!s}", style=Style(color=color, italic=True))
        if target:
            _ = text.append(" → ")
            _ = text.append_text(
                self.format_path(str(target), base=str(root) if root else None)
            )
        elif root:
            _ = text.append(" @ ")
            _ = text.append_text(self.format_path(str(root)))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        vfs_text = self._render_vfs_message(record)
        if vfs_text is not None:
            return vfs_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
