from __future__ import annotations

from pathlib import Path

import pytest

from planfs.core.context import OperationContext
from planfs.sandbox.paths import PathResolver
from planfs.sandbox.roots import RootKind, SettingsRootProvider

SCOPE_ID = "task-1"


@pytest.fixture
def resolver(tmp_path: Path) -> PathResolver:
    return PathResolver(
        SettingsRootProvider(
            workspace_root=tmp_path / "workspace",
            external_linked_folder=tmp_path / "external",
        )
    )


@pytest.fixture
def root(tmp_path: Path) -> Path:
    workspace = tmp_path / "workspace" / SCOPE_ID
    workspace.mkdir(parents=True)
    return workspace


@pytest.fixture
def external_root(tmp_path: Path) -> Path:
    external = tmp_path / "external"
    external.mkdir()
    return external


@pytest.fixture
def context() -> OperationContext:
    return OperationContext(scope_id=SCOPE_ID)


@pytest.fixture
def external_context() -> OperationContext:
    return OperationContext(scope_id=SCOPE_ID, root_kind=RootKind.EXTERNAL_LINK)
