"""List the direct children of a sandbox directory."""

from __future__ import annotations

from pathlib import Path

from planfs.core.context import OperationContext
from planfs.core.errors import InvalidParameter, NotFound
from planfs.sandbox.paths import PathResolver, normalize
from planfs.sandbox.roots import RootKind
from planfs.tools.fs.common import file_operation
from planfs.tools.requests import ListRequest
from planfs.tools.results import OperationResult

ROOT_ALIASES = {"", ".", "root"}
EXTERNAL_LINK_PREFIX = "linked_external/"


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    if size < 1024 * 1024 * 1024:
        return f"{size / (1024 * 1024):.1f} MB"
    return f"{size / (1024 * 1024 * 1024):.1f} GB"


def directory_path(raw_path: str | None, root_kind: RootKind) -> str:
    """Root-relative directory path, ``""`` for the root itself."""
    normalized = normalize(raw_path or "")
    if normalized in ROOT_ALIASES:
        return ""
    if root_kind is RootKind.EXTERNAL_LINK and normalized.startswith(
        EXTERNAL_LINK_PREFIX
    ):
        normalized = normalized[len(EXTERNAL_LINK_PREFIX) :]
    return normalized


def format_entry(entry: Path) -> str:
    try:
        if entry.is_dir():
            return f"[DIR] {entry.name}/"
        return f"[FILE] {entry.name} ({format_size(entry.stat().st_size)})"
    except OSError:
        return f"[ERROR] {entry.name} (error reading)"


@file_operation("list files")
def handle_list(
    request: ListRequest, context: OperationContext, resolver: PathResolver
) -> OperationResult:
    raw_path = context.expand(request.path)
    relative = directory_path(raw_path, context.root_kind)
    directory = resolver.resolve(context.scope_id, relative, context.root_kind)
    if not directory.exists():
        raise NotFound(f"Directory does not exist: {raw_path}")
    if not directory.is_dir():
        raise InvalidParameter(f"Path is not a directory: {raw_path}")

    lines = ["Files: "]
    if relative:
        lines.append(relative)
    entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    if not entries:
        lines.append("(empty directory)")
    lines.extend(format_entry(entry) for entry in entries)
    return OperationResult.success("\n".join(lines) + "\n")
