"""Sandbox roots for workspace and external-link file tools."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from planfs.core.errors import AccessDenied
from planfs.core.settings import (
    EXTERNAL_LINKED_FOLDER_KEY,
    WORKSPACE_ROOT_KEY,
    Settings,
)


class RootKind(str, Enum):
    WORKSPACE = "workspace"
    EXTERNAL_LINK = "external_link"

    @property
    def setting_key(self) -> str:
        if self is RootKind.WORKSPACE:
            return WORKSPACE_ROOT_KEY
        return EXTERNAL_LINKED_FOLDER_KEY

    @property
    def label(self) -> str:
        if self is RootKind.WORKSPACE:
            return "Workspace root"
        return "External linked folder"


class RootProvider(Protocol):
    def root_for(self, scope_id: str, kind: RootKind) -> Path | None:
        """Return the sandbox root for a scope, or None when unconfigured."""
        ...


@dataclass(frozen=True)
class SettingsRootProvider:
    """Roots taken from settings.

    Workspace roots live in one directory per scope under the configured
    base and are created on first use. The external-link root is shared by
    every scope and is never created here.
    """

    workspace_root: Path | None
    external_linked_folder: Path | None

    @classmethod
    def from_settings(cls, settings: Settings) -> SettingsRootProvider:
        return cls(
            workspace_root=settings.workspace_root,
            external_linked_folder=settings.external_linked_folder,
        )

    def root_for(self, scope_id: str, kind: RootKind) -> Path | None:
        if kind is RootKind.EXTERNAL_LINK:
            return self.external_linked_folder
        if self.workspace_root is None:
            return None
        if "/" in scope_id or "\\" in scope_id or scope_id in {".", ".."}:
            raise AccessDenied(f"Invalid scope identifier: {scope_id}")
        root = self.workspace_root / scope_id
        root.mkdir(parents=True, exist_ok=True)
        return root
