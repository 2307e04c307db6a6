"""Redaction helpers for logging tool arguments."""

from __future__ import annotations

import re
from typing import Any

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
TOKEN_RE = re.compile(r"(?i)(api_key|token|secret|password)=([A-Za-z0-9_-]+)")
MAX_LOGGED_CHARS = 120


def redact_text(text: str) -> str:
    text = EMAIL_RE.sub("[redacted-email]", text)
    return TOKEN_RE.sub(r"\1=[redacted]", text)


def summarize_text(text: str, limit: int = MAX_LOGGED_CHARS) -> str:
    text = redact_text(text)
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"


def summarize_args(args: dict[str, Any]) -> dict[str, Any]:
    """File contents can be large; keep log lines short and free of secrets."""
    return {
        key: summarize_text(value) if isinstance(value, str) else value
        for key, value in args.items()
    }
