"""
Summary: Check lexical normalization and every escape policy of RelativePath.
Why: Escape handling is the sandbox boundary of the virtual file system.
"""

from __future__ import annotations

import pytest

from toolbox.features.vfs import (
    EscapePolicy,
    NotRelativePathError,
    PathEscapeError,
    RelativePath,
)


def test_parse_collapses_dots_and_separators() -> None:
    assert RelativePath.parse("a/b/../c").segments == ("a", "c")
    assert RelativePath.parse("a\\.\\\\b//").segments == ("a", "b")


def test_both_separator_styles_are_equivalent() -> None:
    assert RelativePath.parse("assets\\img.png") == RelativePath.parse("assets/img.png")


@pytest.mark.parametrize("raw", ["", ".", "./", "a/..", "a/b/../.."])
def test_root_forms(raw: str) -> None:
    path = RelativePath.parse(raw)
    assert path.is_root
    assert str(path) == "."


def test_deny_rejects_escape() -> None:
    with pytest.raises(PathEscapeError):
        _ = RelativePath.parse("../../etc")
    with pytest.raises(PathEscapeError):
        _ = RelativePath.parse("a/../../b")


def test_clamp_stays_at_root() -> None:
    path = RelativePath.parse("../../etc", EscapePolicy.CLAMP)
    assert path.segments == ("etc",)
    assert path.escape_depth == 0


def test_allow_keeps_leading_parents() -> None:
    path = RelativePath.parse("../../etc", EscapePolicy.ALLOW)
    assert path.segments == ("..", "..", "etc")
    assert path.escape_depth == 2
    assert str(path) == "../../etc"


@pytest.mark.parametrize("raw", ["/etc", "\\etc", "C:\\etc", "\\\\srv\\share\\x"])
def test_anchored_input_rejected(raw: str) -> None:
    with pytest.raises(NotRelativePathError):
        _ = RelativePath.parse(raw)


def test_join_name_and_parent() -> None:
    base = RelativePath.parse("docs")
    joined = base / "guide\\intro.md"
    assert joined.segments == ("docs", "guide", "intro.md")
    assert joined.name == "intro.md"
    assert joined.parent == RelativePath(("docs", "guide"))
    assert RelativePath().parent.is_root
    assert (joined / RelativePath(("..", ".."))).segments == ("docs",)


def test_join_rejects_escape_and_anchor() -> None:
    with pytest.raises(PathEscapeError):
        _ = RelativePath.parse("a") / "../.."
    with pytest.raises(NotRelativePathError):
        _ = RelativePath.parse("a") / "/abs"


@pytest.mark.parametrize("raw", ["a/../C:/Windows", "a/C:x", "a\\d:\\x", "../C:"])
@pytest.mark.parametrize("policy", list(EscapePolicy))
def test_drive_in_later_segment_rejected(raw: str, policy: EscapePolicy) -> None:
    with pytest.raises(NotRelativePathError):
        _ = RelativePath.parse(raw, policy)


def test_join_rejects_drive_segment() -> None:
    with pytest.raises(NotRelativePathError):
        _ = RelativePath.parse("a") / "b/C:/x"
    with pytest.raises(NotRelativePathError):
        _ = RelativePath.parse("a").joinpath(RelativePath(("C:", "x")))


def test_colon_later_in_a_segment_is_kept() -> None:
    assert RelativePath.parse("notes/12:30.txt").segments == ("notes", "12:30.txt")
