"""Policies describing what ``..`` may do at the top of a virtual root."""

from __future__ import annotations

from enum import Enum
from typing import Final


class EscapePolicy(str, Enum):
    """Represent how to handle ``..`` segments that climb above the root."""

    DENY = "deny"
    CLAMP = "clamp"
    ALLOW = "allow"

    @staticmethod
    def from_user_input(value: str) -> "EscapePolicy":
        """Translate a raw configuration value into the matching policy."""

        normalized = value.strip().lower()
        for policy in EscapePolicy:
            if policy.value == normalized:
                return policy
        valid: Final[str] = ", ".join(p.value for p in EscapePolicy)
        msg = f"Unsupported escape policy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


__all__ = ["EscapePolicy"]
