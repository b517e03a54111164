"""
Summary: Resolve root-relative paths to native paths and query the host for them.
Why: Let callers address files portably without ever leaving their sandbox root.
"""

# Where: features/vfs/usecases/virtual_file_system.py
# Assumptions: - The root is immutable; re-rooting builds a new instance.
# Trade-offs: - Resolution is lexical, so symlinks below the root are not
#   followed when checking for escapes.

from __future__ import annotations

import os
from pathlib import Path

from toolbox.config import settings
from toolbox.platform.filesystem import ensure_directory
from toolbox.platform.logging import logger

from ..adapters.local import LocalFileSystemGateway
from ..domain.errors import (
    FilesystemError,
    InvalidRootError,
    NotAbsolutePathError,
    PathEscapeError,
)
from ..domain.policy import EscapePolicy
from ..domain.relative_path import RelativePath
from ..domain.separators import split_native
from .ports import FileSystemGateway

PathInput = str | os.PathLike[str]


def _absolute_root(root: PathInput) -> Path:
    try:
        text = os.fspath(root)
    except TypeError as exc:
        raise InvalidRootError(f"Root must be a path, got {root!r}") from exc
    if not text.strip() or "\x00" in text:
        raise InvalidRootError(f"Root {text!r} is not a usable path")
    try:
        return Path(os.path.abspath(os.path.expanduser(text)))
    except OSError as exc:
        raise InvalidRootError(f"Cannot make root {text!r} absolute: {exc}") from exc


class VirtualFileSystem:
    """Virtual file system anchored at an absolute root directory.

    Paths handed to the instance are relative to the root and may use ``/``
    or ``\\`` interchangeably. ``resolve`` is a pure function of the root and
    its argument; the query methods forward the resolved path to a
    ``FileSystemGateway``.

    Example:
        vfs = VirtualFileSystem("/data/project")
        vfs.resolve("assets\\\\img.png")   # Path("/data/project/assets/img.png")
        vfs.resolve("../../etc")           # raises PathEscapeError
    """

    def __init__(
        self,
        root: PathInput,
        *,
        escape_policy: EscapePolicy | str | None = None,
        create_root: bool | None = None,
        gateway: FileSystemGateway | None = None,
    ) -> None:
        """
        Args:
            root: Base directory; relative values are anchored at the process cwd.
            escape_policy: Behaviour of ``..`` above the root. Defaults to the
                configured ``vfs.escape_policy``.
            create_root: Create the root (and parents) when missing. Defaults to
                the configured ``vfs.create_root``.
            gateway: Host filesystem access. Defaults to the local filesystem.

        Raises:
            InvalidRootError: If the root is empty, cannot be made absolute,
                exists as a non-directory, or cannot be created.
        """
        self._root = _absolute_root(root)
        raw_policy = escape_policy if escape_policy is not None else settings.VFS_ESCAPE_POLICY
        self._policy = (
            raw_policy if isinstance(raw_policy, EscapePolicy) else EscapePolicy.from_user_input(raw_policy)
        )
        self._gateway: FileSystemGateway = gateway or LocalFileSystemGateway()

        should_create = settings.VFS_CREATE_ROOT if create_root is None else create_root
        try:
            if should_create:
                _ = ensure_directory(self._root)
            elif self._gateway.exists(self._root) and not self._gateway.is_dir(self._root):
                raise InvalidRootError(f"Root {self._root} exists but is not a directory")
        except (OSError, FilesystemError) as exc:
            raise InvalidRootError(f"Cannot establish root {self._root}: {exc}") from exc

        logger.debug(
            "VFS root %s (policy=%s)",
            self._root,
            self._policy.value,
            extra={"vfs_event": "vfs.root", "root": str(self._root)},
        )

    @property
    def root(self) -> Path:
        return self._root

    @property
    def escape_policy(self) -> EscapePolicy:
        return self._policy

    def normalize(self, relative_path: PathInput | RelativePath) -> RelativePath:
        """Normalize ``relative_path`` under this instance's escape policy."""
        if isinstance(relative_path, RelativePath):
            return RelativePath().joinpath(relative_path, self._policy)
        return RelativePath.parse(relative_path, self._policy)

    def resolve(self, relative_path: PathInput | RelativePath) -> Path:
        """Resolve ``relative_path`` to a native absolute path below the root.

        Raises:
            NotRelativePathError: If ``relative_path`` is anchored.
            PathEscapeError: If it climbs above the root under ``DENY``.
        """
        normalized = self.normalize(relative_path)
        resolved = self._root.joinpath(*normalized.segments)
        if normalized.escape_depth:
            resolved = Path(os.path.normpath(resolved))
        logger.debug(
            "Resolved %s -> %s",
            relative_path,
            resolved,
            extra={
                "vfs_event": "vfs.resolve",
                "root": str(self._root),
                "requested": str(relative_path),
                "target": str(resolved),
            },
        )
        return resolved

    def _contains(self, path: Path) -> bool:
        return path == self._root or path.is_relative_to(self._root)

    def absolute(self, path: PathInput | RelativePath) -> Path:
        """Return an absolute native path for ``path``.

        Relative input goes through ``resolve``. Absolute input is normalized
        lexically and, unless the policy is ``ALLOW``, must lie inside the root.

        Raises:
            NotAbsolutePathError: If ``path`` is anchored but not absolute on
                this host (e.g. ``C:\\\\x`` on POSIX).
            PathEscapeError: If the result lies outside the root.
        """
        if isinstance(path, RelativePath):
            return self.resolve(path)
        anchor, _ = split_native(path)
        if not anchor:
            return self.resolve(path)

        candidate = Path(os.path.normpath(os.fspath(path)))
        if not candidate.is_absolute():
            raise NotAbsolutePathError(f"{os.fspath(path)!r} is not absolute on this host")
        if self._policy is not EscapePolicy.ALLOW and not self._contains(candidate):
            raise PathEscapeError(f"{candidate} lies outside the root {self._root}")
        return candidate

    def relative(self, path: PathInput) -> RelativePath:
        """Express the absolute ``path`` relative to the root.

        The root itself maps to ``RelativePath()`` (rendered as ``.``).

        Raises:
            NotAbsolutePathError: If ``path`` is not absolute.
            PathEscapeError: If ``path`` lies outside the root.
        """
        candidate = Path(os.fspath(path))
        if not candidate.is_absolute():
            raise NotAbsolutePathError(f"Expected an absolute path, got {os.fspath(path)!r}")
        candidate = Path(os.path.normpath(candidate))
        if not self._contains(candidate):
            raise PathEscapeError(f"{candidate} lies outside the root {self._root}")
        return RelativePath(candidate.relative_to(self._root).parts)

    def with_root(self, new_root: PathInput) -> VirtualFileSystem:
        """Return a new instance rooted at ``new_root``; this one is unchanged.

        Relative values are resolved against the current root under the
        current policy. The policy and gateway carry over.

        Raises:
            InvalidRootError: If the new root is not an existing directory.
        """
        target = self.absolute(new_root)
        try:
            is_dir = self._gateway.is_dir(target)
        except FilesystemError as exc:
            raise InvalidRootError(f"Cannot inspect new root {target}: {exc}") from exc
        if not is_dir:
            raise InvalidRootError(f"New root {target} is not an existing directory")

        logger.debug(
            "Rerooted %s -> %s",
            self._root,
            target,
            extra={"vfs_event": "vfs.with_root", "root": str(self._root), "target": str(target)},
        )
        return VirtualFileSystem(target, escape_policy=self._policy, create_root=False, gateway=self._gateway)

    def exists(self, relative_path: PathInput | RelativePath) -> bool:
        return self._gateway.exists(self.resolve(relative_path))

    def is_dir(self, relative_path: PathInput | RelativePath) -> bool:
        return self._gateway.is_dir(self.resolve(relative_path))

    def is_file(self, relative_path: PathInput | RelativePath) -> bool:
        return self._gateway.is_file(self.resolve(relative_path))

    def create_dir(self, relative_path: PathInput | RelativePath) -> Path:
        """Create one directory; missing parents are an error, not created.

        Returns:
            Path: The created directory.

        Raises:
            FilesystemError: If the host refuses (parent missing, already exists, ...).
        """
        target = self.resolve(relative_path)
        self._gateway.create_dir(target)
        logger.debug(
            "Created directory %s",
            target,
            extra={"vfs_event": "vfs.create_dir", "root": str(self._root), "target": str(target)},
        )
        return target

    def __repr__(self) -> str:
        return f"VirtualFileSystem(root={str(self._root)!r}, escape_policy={self._policy.value!r})"


__all__ = ["PathInput", "VirtualFileSystem"]
