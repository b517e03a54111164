"""
Summary: Immutable root-relative path with lexical ``.``/``..`` resolution.
Why: Resolve user paths independently of host separators before touching disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import NotRelativePathError, PathEscapeError
from .policy import EscapePolicy
from .separators import has_drive, split_native

CURRENT = "."
PARENT = ".."


@dataclass(slots=True, frozen=True)
class RelativePath:
    """Normalized segments below a root.

    ``segments`` never holds ``.``, empty strings, separators or drive
    prefixes. It holds leading ``..`` entries only when built under
    ``EscapePolicy.ALLOW``.
    """

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(
        cls,
        raw: str | os.PathLike[str],
        policy: EscapePolicy = EscapePolicy.DENY,
    ) -> RelativePath:
        """Normalize ``raw`` into a ``RelativePath``.

        Args:
            raw: Path using ``/``, ``\\`` or a mix of both.
            policy: What a ``..`` at the top of the path does.

        Returns:
            RelativePath: The normalized path; ``""`` and ``"."`` give the root.

        Raises:
            NotRelativePathError: If ``raw`` carries a root, drive or UNC anchor,
                or any later segment starts with a drive.
            PathEscapeError: If ``raw`` climbs above the root under ``DENY``.
        """
        anchor, parts = split_native(raw)
        if anchor:
            raise NotRelativePathError(f"Expected a relative path, got {os.fspath(raw)!r}")
        return cls(_collapse(parts, policy, os.fspath(raw)))

    @property
    def escape_depth(self) -> int:
        """Number of levels this path climbs above the root."""
        depth = 0
        for segment in self.segments:
            if segment != PARENT:
                break
            depth += 1
        return depth

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def name(self) -> str:
        return self.segments[-1] if self.segments else ""

    @property
    def parent(self) -> RelativePath:
        """Path one level up; the root is its own parent."""
        return RelativePath(self.segments[:-1])

    def joinpath(self, other: str | RelativePath, policy: EscapePolicy = EscapePolicy.DENY) -> RelativePath:
        """Append ``other`` and renormalize under ``policy``."""
        if isinstance(other, RelativePath):
            extra = list(other.segments)
        else:
            anchor, extra = split_native(other)
            if anchor:
                raise NotRelativePathError(f"Expected a relative path, got {other!r}")
        return RelativePath(_collapse([*self.segments, *extra], policy, str(other)))

    def __truediv__(self, other: str | RelativePath) -> RelativePath:
        return self.joinpath(other)

    def as_posix(self) -> str:
        return "/".join(self.segments) if self.segments else CURRENT

    def __str__(self) -> str:
        return self.as_posix()


def _collapse(parts: list[str], policy: EscapePolicy, original: str) -> tuple[str, ...]:
    """Drop ``.`` and fold ``..`` into its predecessor according to ``policy``."""
    stack: list[str] = []
    for part in parts:
        if part == CURRENT:
            continue
        if has_drive(part):
            raise NotRelativePathError(f"Path {original!r} carries a drive in segment {part!r}")
        if part != PARENT:
            stack.append(part)
        elif stack and stack[-1] != PARENT:
            _ = stack.pop()
        elif policy is EscapePolicy.ALLOW:
            stack.append(PARENT)
        elif policy is EscapePolicy.DENY:
            raise PathEscapeError(f"Path {original!r} escapes above the root")
        # CLAMP: ".." at the root stays at the root
    return tuple(stack)


__all__ = ["RelativePath"]
