"""
Summary: Exercise root setup, resolution, re-rooting, and host queries of the VFS.
Why: Callers rely on identical results for either separator and on a sealed root.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from toolbox.config import settings
from toolbox.features.vfs import (
    EscapePolicy,
    FilesystemError,
    InvalidRootError,
    NotAbsolutePathError,
    NotRelativePathError,
    PathEscapeError,
    RelativePath,
    VirtualFileSystem,
)

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX path literals")


class _FailingGateway:
    """Gateway whose every host call fails like a permission fault."""

    def _fail(self, path: Path) -> bool:
        raise FilesystemError(f"Permission denied: {path}", path)

    def exists(self, path: Path) -> bool:
        return self._fail(path)

    def is_dir(self, path: Path) -> bool:
        return self._fail(path)

    def is_file(self, path: Path) -> bool:
        return self._fail(path)

    def create_dir(self, path: Path) -> None:
        _ = self._fail(path)


class _EmptyGateway:
    """Gateway for a host where nothing exists yet."""

    def exists(self, path: Path) -> bool:
        return False

    def is_dir(self, path: Path) -> bool:
        return False

    def is_file(self, path: Path) -> bool:
        return False

    def create_dir(self, path: Path) -> None:
        raise FilesystemError(f"Read-only host: {path}", path)


class TestConstruction:
    def test_relative_root_is_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        vfs = VirtualFileSystem("sub/../data", escape_policy="deny")
        assert vfs.root == Path.cwd() / "data"
        assert vfs.root.is_absolute()

    def test_missing_root_is_accepted_without_creation(self, tmp_path: Path) -> None:
        vfs = VirtualFileSystem(tmp_path / "later", create_root=False)
        assert not vfs.root.exists()
        assert not vfs.exists(".")

    def test_create_root_makes_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b"
        _ = VirtualFileSystem(target, create_root=True)
        assert target.is_dir()

    @pytest.mark.parametrize("root", ["", "   ", "bad\x00root"])
    def test_unusable_roots_rejected(self, root: str) -> None:
        with pytest.raises(InvalidRootError):
            _ = VirtualFileSystem(root)

    def test_non_path_root_rejected(self) -> None:
        with pytest.raises(InvalidRootError):
            _ = VirtualFileSystem(42)  # type: ignore[arg-type]

    def test_file_root_rejected(self, project_root: Path) -> None:
        with pytest.raises(InvalidRootError):
            _ = VirtualFileSystem(project_root / "assets" / "img.png")
        with pytest.raises(InvalidRootError):
            _ = VirtualFileSystem(project_root / "assets" / "img.png", create_root=True)

    def test_gateway_failure_becomes_invalid_root(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidRootError) as excinfo:
            _ = VirtualFileSystem(tmp_path, create_root=False, gateway=_FailingGateway())
        assert isinstance(excinfo.value.__cause__, FilesystemError)

    def test_policy_defaults_to_configuration(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, "VFS_ESCAPE_POLICY", "clamp")
        assert VirtualFileSystem(tmp_path).escape_policy is EscapePolicy.CLAMP

    def test_unknown_policy_name_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Valid options"):
            _ = VirtualFileSystem(tmp_path, escape_policy="sometimes")


class TestResolve:
    @posix_only
    def test_example_root_with_both_separators(self) -> None:
        vfs = VirtualFileSystem("/data/project", create_root=False, gateway=_EmptyGateway())
        expected = Path("/data/project/assets/img.png")
        assert vfs.resolve("assets\\img.png") == expected
        assert vfs.resolve("assets/img.png") == expected
        assert str(vfs.resolve("assets/img.png")) == "/data/project/assets/img.png"

    def test_dotdot_matches_direct_path_for_either_separator(self, vfs: VirtualFileSystem) -> None:
        for sep in ("/", "\\"):
            assert vfs.resolve("a/b/../c") == vfs.resolve("a" + sep + "c")
            assert vfs.resolve(sep.join(["a", "b", "..", "c"])) == vfs.root / "a" / "c"

    def test_root_forms_resolve_to_root(self, vfs: VirtualFileSystem) -> None:
        assert vfs.resolve("") == vfs.root
        assert vfs.resolve(".") == vfs.root
        assert vfs.resolve(RelativePath()) == vfs.root

    def test_resolve_uses_native_separator(self, vfs: VirtualFileSystem) -> None:
        assert str(vfs.resolve("x\\y")) == os.path.join(str(vfs.root), "x", "y")

    def test_escape_denied(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(PathEscapeError):
            _ = vfs.resolve("../../etc")
        with pytest.raises(PathEscapeError):
            _ = vfs.resolve(RelativePath(("..", "x")))

    def test_escape_clamped(self, project_root: Path) -> None:
        vfs = VirtualFileSystem(project_root, escape_policy=EscapePolicy.CLAMP)
        assert vfs.resolve("../../etc") == project_root / "etc"

    def test_escape_allowed(self, project_root: Path) -> None:
        vfs = VirtualFileSystem(project_root, escape_policy=EscapePolicy.ALLOW)
        assert vfs.resolve("../sibling") == project_root.parent / "sibling"

    @pytest.mark.parametrize("raw", ["/etc/passwd", "\\etc", "C:\\x", "\\\\srv\\share\\x"])
    def test_anchored_input_rejected(self, vfs: VirtualFileSystem, raw: str) -> None:
        with pytest.raises(NotRelativePathError):
            _ = vfs.resolve(raw)

    @pytest.mark.parametrize("policy", list(EscapePolicy))
    def test_drive_after_dotdot_cannot_switch_drives(self, project_root: Path, policy: EscapePolicy) -> None:
        vfs = VirtualFileSystem(project_root, escape_policy=policy)
        with pytest.raises(NotRelativePathError):
            _ = vfs.resolve("a/../C:/Windows")
        with pytest.raises(NotRelativePathError):
            _ = vfs.exists("docs/D:x")

    def test_resolve_does_not_touch_disk(self, project_root: Path) -> None:
        vfs = VirtualFileSystem(project_root, gateway=None)
        assert vfs.resolve("no/such/file") == project_root / "no" / "such" / "file"

    def test_normalize(self, vfs: VirtualFileSystem) -> None:
        assert vfs.normalize("a\\b/./c/..") == RelativePath(("a", "b"))


class TestAbsoluteAndRelative:
    def test_absolute_of_relative_input(self, vfs: VirtualFileSystem) -> None:
        assert vfs.absolute("docs\\x") == vfs.root / "docs" / "x"

    def test_absolute_input_inside_root(self, vfs: VirtualFileSystem) -> None:
        inside = str(vfs.root / "docs" / ".." / "assets")
        assert vfs.absolute(inside) == vfs.root / "assets"
        assert vfs.absolute(vfs.root) == vfs.root

    def test_absolute_input_outside_root(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(PathEscapeError):
            _ = vfs.absolute(vfs.root.parent / "elsewhere")

    def test_absolute_input_outside_root_allowed(self, project_root: Path) -> None:
        vfs = VirtualFileSystem(project_root, escape_policy=EscapePolicy.ALLOW)
        assert vfs.absolute(project_root.parent) == project_root.parent

    @posix_only
    def test_drive_path_is_not_absolute_on_posix(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(NotAbsolutePathError):
            _ = vfs.absolute("C:\\x")

    def test_relative_of_root_is_dot(self, vfs: VirtualFileSystem) -> None:
        rel = vfs.relative(vfs.root)
        assert rel.is_root
        assert str(rel) == "."

    def test_relative_of_child(self, vfs: VirtualFileSystem) -> None:
        assert vfs.relative(vfs.root / "assets" / "img.png") == RelativePath(("assets", "img.png"))

    def test_relative_rejects_relative_input(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(NotAbsolutePathError):
            _ = vfs.relative("assets/img.png")

    def test_relative_rejects_outside_paths(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(PathEscapeError):
            _ = vfs.relative(vfs.root.parent)
        with pytest.raises(PathEscapeError):
            _ = vfs.relative(str(vfs.root) + "-sibling")

    def test_relative_round_trips_through_resolve(self, vfs: VirtualFileSystem) -> None:
        target = vfs.resolve("docs/guide/intro.md")
        assert vfs.resolve(vfs.relative(target)) == target


class TestWithRoot:
    def test_relative_new_root(self, vfs: VirtualFileSystem) -> None:
        child = vfs.with_root("assets")
        assert child.root == vfs.root / "assets"
        assert child.escape_policy is vfs.escape_policy
        assert child.is_file("img.png")
        # the original instance is unchanged
        assert vfs.root.name == "project"

    def test_absolute_new_root_inside(self, vfs: VirtualFileSystem) -> None:
        assert vfs.with_root(vfs.root / "docs").root == vfs.root / "docs"

    def test_missing_new_root(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(InvalidRootError):
            _ = vfs.with_root("nope")

    def test_file_new_root(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(InvalidRootError):
            _ = vfs.with_root("assets/img.png")

    def test_new_root_escape_denied(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(PathEscapeError):
            _ = vfs.with_root("..")


class TestHostQueries:
    def test_exists_is_dir_is_file(self, vfs: VirtualFileSystem) -> None:
        assert vfs.exists("assets/img.png")
        assert vfs.is_file("assets\\img.png")
        assert not vfs.is_dir("assets/img.png")
        assert vfs.is_dir("docs")
        assert not vfs.is_file("docs")
        assert not vfs.exists("missing")
        assert not vfs.is_dir("missing")
        assert not vfs.is_file("missing")

    def test_query_below_a_file_is_missing_not_error(self, vfs: VirtualFileSystem) -> None:
        assert not vfs.exists("assets/img.png/inner")

    def test_host_failures_surface(self, project_root: Path) -> None:
        vfs = VirtualFileSystem(project_root, create_root=True, gateway=_FailingGateway())
        for query in (vfs.exists, vfs.is_dir, vfs.is_file):
            with pytest.raises(FilesystemError):
                _ = query("assets")

    def test_create_dir(self, vfs: VirtualFileSystem) -> None:
        created = vfs.create_dir("docs/new_dir")
        assert created == vfs.root / "docs" / "new_dir"
        assert vfs.is_dir("docs\\new_dir")

    def test_create_dir_is_not_recursive(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(FilesystemError) as excinfo:
            _ = vfs.create_dir("new1/new2")
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)
        assert excinfo.value.path == vfs.root / "new1" / "new2"

    def test_create_existing_dir_fails(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(FilesystemError):
            _ = vfs.create_dir("docs")

    def test_create_dir_escape_denied(self, vfs: VirtualFileSystem) -> None:
        with pytest.raises(PathEscapeError):
            _ = vfs.create_dir("../outside")
        assert not (vfs.root.parent / "outside").exists()


def test_repr_mentions_root_and_policy(vfs: VirtualFileSystem) -> None:
    text = repr(vfs)
    assert str(vfs.root) in text
    assert "deny" in text
