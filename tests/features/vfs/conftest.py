"""Shared pytest fixtures for virtual file system tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolbox.features.vfs import EscapePolicy, VirtualFileSystem


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Provide a small on-disk tree: ``assets/img.png`` and an empty ``docs/``."""

    root = tmp_path / "project"
    (root / "assets").mkdir(parents=True)
    _ = (root / "assets" / "img.png").write_bytes(b"\x89PNG")
    (root / "docs").mkdir()
    return root


@pytest.fixture
def vfs(project_root: Path) -> VirtualFileSystem:
    """VFS rooted at ``project_root`` with escapes denied."""

    return VirtualFileSystem(project_root, escape_policy=EscapePolicy.DENY)
