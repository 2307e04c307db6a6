"""Tool call messages exchanged with the gateway."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

from planfs.core.errors import ErrorKind


@dataclass(frozen=True)
class ToolCall:
    scope_id: str
    call_id: str
    tool: str
    args: dict[str, Any]
    requires_confirm: bool


@dataclass(frozen=True)
class ToolResult:
    call_id: str
    ok: bool
    result: str | None
    error: str | None
    error_kind: ErrorKind | None
    elapsed_ms: int
    advisory: bool = False


def new_call_id() -> str:
    return f"call_{uuid.uuid4().hex}"


def build_tool_call(
    scope_id: str, tool: str, args: dict[str, Any], requires_confirm: bool = True
) -> ToolCall:
    return ToolCall(
        scope_id=scope_id,
        call_id=new_call_id(),
        tool=tool,
        args=args,
        requires_confirm=requires_confirm,
    )
