"""Policy for running file tools."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class RiskLevel(str, Enum):
    SAFE = "safe"
    CONFIRM = "confirm"


class Decision(str, Enum):
    ALLOW = "allow"
    CONFIRM = "confirm"
    DENY = "deny"


@dataclass(frozen=True)
class PolicyDecision:
    decision: Decision
    reason: str


class ToolPolicy:
    """Deny and confirm lists hold tool names or glob patterns (``fs_ext.*``).

    A deny match wins over a confirm match; tools matching neither fall back
    to their risk level.
    """

    def __init__(
        self,
        confirm_tools: Iterable[str] | None = None,
        deny_tools: Iterable[str] | None = None,
    ) -> None:
        self._confirm_patterns = tuple(sorted(confirm_tools or ()))
        self._deny_patterns = tuple(sorted(deny_tools or ()))

    def evaluate(self, tool_name: str, risk_level: RiskLevel) -> PolicyDecision:
        pattern = _first_match(tool_name, self._deny_patterns)
        if pattern is not None:
            return PolicyDecision(Decision.DENY, f"Tool is blocked by policy ({pattern})")
        pattern = _first_match(tool_name, self._confirm_patterns)
        if pattern is not None:
            return PolicyDecision(
                Decision.CONFIRM, f"Tool requires confirmation ({pattern})"
            )
        if risk_level is RiskLevel.SAFE:
            return PolicyDecision(Decision.ALLOW, "Safe tool")
        return PolicyDecision(Decision.CONFIRM, "Tool modifies files")


def _first_match(tool_name: str, patterns: tuple[str, ...]) -> str | None:
    for pattern in patterns:
        if fnmatch.fnmatchcase(tool_name, pattern):
            return pattern
    return None
