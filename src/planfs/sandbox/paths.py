"""Logical path normalization and sandbox-confined resolution."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from planfs.core.errors import AccessDenied, ConfigurationError, IOFailure
from planfs.sandbox.roots import RootKind, RootProvider

logger = logging.getLogger(__name__)

# A caller may address files relative to its own scope directory, e.g.
# "scope-1763035234741/notes/todo.md". The token is any run of non-"/" chars.
SCOPE_PREFIX_RE = re.compile(r"^scope-[^/]+/")


def normalize(path: str) -> str:
    """Turn a logical path into a root-relative one.

    Each pass trims whitespace, strips every leading ``/``, one leading
    ``./`` and one leading ``scope-<token>/`` segment. Passes repeat until
    nothing changes, so ``normalize(normalize(p)) == normalize(p)``.
    """
    current = path
    while True:
        stripped = _normalize_once(current)
        if stripped == current:
            return stripped
        current = stripped


def _normalize_once(path: str) -> str:
    normalized = path.strip().lstrip("/")
    if normalized.startswith("./"):
        normalized = normalized[2:]
    return SCOPE_PREFIX_RE.sub("", normalized, count=1)


def file_extension(path: str) -> str:
    name = path.rsplit("/", 1)[-1]
    index = name.rfind(".")
    if index == -1 or index == len(name) - 1:
        return ""
    return name[index:]


def is_supported_type(path: str, supported_extensions: Iterable[str]) -> bool:
    if not path:
        return False
    if path.endswith("/"):
        return True
    return file_extension(path).lower() in supported_extensions


@dataclass(frozen=True)
class PathResolver:
    roots: RootProvider

    def root(self, scope_id: str, kind: RootKind) -> Path:
        if not scope_id or not scope_id.strip():
            raise ConfigurationError(
                "Scope identifier is required for file operations but is empty",
                setting="scope_id",
            )
        root = self.roots.root_for(scope_id, kind)
        if root is None:
            raise ConfigurationError(
                f"{kind.label} is not configured", setting=kind.setting_key
            )
        return root

    def resolve(self, scope_id: str, normalized_path: str, kind: RootKind) -> Path:
        """Resolve a normalized path inside the sandbox root for ``kind``.

        The returned path is the lexically normalized join of the canonical
        root and ``normalized_path``; symlinks in it are left in place so that
        operations act on the link itself. Its canonical form (symlinks and
        ``..`` resolved) must be the root or lie beneath it. Targets that do
        not exist yet are canonicalized through their deepest existing
        ancestor, so create flows get the same containment check.
        """
        root = self.root(scope_id, kind)
        canonical_root = _canonicalize(root)
        target = Path(os.path.normpath(canonical_root / normalized_path))
        if not _is_within(target, canonical_root) or not _is_within(
            _canonicalize(target), canonical_root
        ):
            logger.warning(
                "Rejected path outside %s: %s -> %s", kind.value, normalized_path, target
            )
            raise AccessDenied(
                f"Access denied: path is outside the {kind.value} directory: "
                f"{normalized_path}"
            )
        return target


def _is_within(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def _canonicalize(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except FileNotFoundError:
        pass
    except (OSError, RuntimeError) as exc:
        raise IOFailure(f"Cannot resolve path {path}: {exc}") from exc
    try:
        return path.resolve()
    except (OSError, RuntimeError) as exc:
        raise IOFailure(f"Cannot resolve path {path}: {exc}") from exc
