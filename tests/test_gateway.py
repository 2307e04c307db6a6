from __future__ import annotations

import asyncio
import dataclasses
import json
from pathlib import Path

import pytest

from planfs.core.errors import ErrorKind
from planfs.core.settings import DEFAULT_SUPPORTED_EXTENSIONS, Settings
from planfs.tools.gateway import ConfirmationRequired, ToolGateway, build_gateway
from planfs.tools.schemas import ToolResult, build_tool_call

SCOPE_ID = "task-1"


def _settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "workspace_root": tmp_path / "workspace",
        "external_linked_folder": None,
        "enable_short_url": False,
        "short_url_map_path": None,
        "supported_extensions": DEFAULT_SUPPORTED_EXTENSIONS,
        "confirm_tools": frozenset(),
        "deny_tools": frozenset(),
        "log_level": 30,
    }
    values.update(overrides)
    return Settings(**values)


def _run(gateway: ToolGateway, tool: str, args: dict, confirm: bool = False) -> ToolResult:
    call = build_tool_call(SCOPE_ID, tool, args, requires_confirm=confirm)
    return asyncio.run(gateway.execute(call))


def test_write_requires_confirmation(tmp_path) -> None:
    gateway = build_gateway(_settings(tmp_path))
    call = build_tool_call(SCOPE_ID, "fs.write", {"file_path": "a.md", "contents": "hi"})

    with pytest.raises(ConfirmationRequired) as excinfo:
        asyncio.run(gateway.execute(call))
    assert excinfo.value.tool_name == "fs.write"
    assert not (tmp_path / "workspace" / SCOPE_ID / "a.md").exists()

    result = asyncio.run(
        gateway.execute(dataclasses.replace(call, requires_confirm=False))
    )
    assert result.ok
    assert result.call_id == call.call_id
    assert (tmp_path / "workspace" / SCOPE_ID / "a.md").read_text(encoding="utf-8") == "hi"


def test_read_runs_without_confirmation(tmp_path) -> None:
    root = tmp_path / "workspace" / SCOPE_ID
    root.mkdir(parents=True)
    (root / "a.txt").write_text("one\ntwo\n", encoding="utf-8")
    gateway = build_gateway(_settings(tmp_path))

    result = _run(gateway, "fs.read", {"path": "a.txt"}, confirm=True)

    assert result.ok
    assert result.result == "     1|one\n     2|two\n"
    assert result.error is None
    assert not result.advisory


def test_path_wins_over_file_path(tmp_path) -> None:
    root = tmp_path / "workspace" / SCOPE_ID
    root.mkdir(parents=True)
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / "b.txt").write_text("b", encoding="utf-8")
    gateway = build_gateway(_settings(tmp_path))

    result = _run(gateway, "fs.read", {"path": "b.txt", "file_path": "a.txt"})

    assert result.result == "     1|b\n"


def test_advisory_is_flagged(tmp_path) -> None:
    root = tmp_path / "workspace" / SCOPE_ID
    root.mkdir(parents=True)
    (root / "big.txt").write_text("x\n" * 400, encoding="utf-8")
    gateway = build_gateway(_settings(tmp_path))

    result = _run(gateway, "fs.read", {"file_path": "big.txt"})

    assert result.ok
    assert result.advisory
    assert result.error_kind is ErrorKind.SIZE_LIMIT_EXCEEDED
    assert "exceeds limit of 300 lines" in result.result


def test_denied_tool_is_not_run(tmp_path) -> None:
    root = tmp_path / "workspace" / SCOPE_ID
    root.mkdir(parents=True)
    (root / "keep.txt").write_text("keep", encoding="utf-8")
    gateway = build_gateway(_settings(tmp_path, deny_tools=frozenset({"fs.delete"})))

    result = _run(gateway, "fs.delete", {"file_path": "keep.txt"})

    assert not result.ok
    assert result.error == "Tool is blocked by policy (fs.delete)"
    assert (root / "keep.txt").exists()


def test_confirm_list_applies_to_safe_tools(tmp_path) -> None:
    gateway = build_gateway(_settings(tmp_path, confirm_tools=frozenset({"fs.list"})))
    with pytest.raises(ConfirmationRequired):
        _run(gateway, "fs.list", {}, confirm=True)


def test_schema_violations(tmp_path) -> None:
    gateway = build_gateway(_settings(tmp_path))

    missing = _run(gateway, "fs.write", {"file_path": "a.txt"})
    wrong_type = _run(gateway, "fs.read", {"file_path": "a.txt", "offset": "2"})

    assert missing.error_kind is ErrorKind.MISSING_PARAMETER
    assert missing.error == "Error: 'contents' parameter is required"
    assert wrong_type.error_kind is ErrorKind.INVALID_PARAMETER
    assert wrong_type.error.startswith("Error: Invalid value for offset")


def test_unknown_tool(tmp_path) -> None:
    gateway = build_gateway(_settings(tmp_path))
    with pytest.raises(KeyError):
        _run(gateway, "fs.move", {})


def test_unconfigured_external_root(tmp_path) -> None:
    gateway = build_gateway(_settings(tmp_path))

    result = _run(gateway, "fs_ext.count", {"file_path": "a.txt"})

    assert result.error_kind is ErrorKind.CONFIGURATION
    assert result.error == (
        "Error: External linked folder is not configured. Please configure "
        "'PLANFS_EXTERNAL_LINKED_FOLDER' before using file tools."
    )


def test_external_root_operations(tmp_path) -> None:
    external = tmp_path / "shared"
    external.mkdir()
    gateway = build_gateway(_settings(tmp_path, external_linked_folder=external))

    written = _run(gateway, "fs_ext.write", {"file_path": "n.md", "contents": "x"})
    listed = _run(gateway, "fs_ext.list", {"path": "linked_external/"})

    assert written.ok
    assert (external / "n.md").read_text(encoding="utf-8") == "x"
    assert listed.result == "Files: \n[FILE] n.md (1 B)\n"


def test_short_urls_are_expanded(tmp_path) -> None:
    map_path = tmp_path / "short_urls.json"
    map_path.write_text(
        json.dumps({SCOPE_ID: {"http://s@Url.a/12": "https://example.com/report"}}),
        encoding="utf-8",
    )
    gateway = build_gateway(
        _settings(tmp_path, enable_short_url=True, short_url_map_path=map_path)
    )

    result = _run(
        gateway,
        "fs.write",
        {"file_path": "links.md", "contents": "see http://s@Url.a/12 and http://s@Url.a/99"},
    )

    assert result.ok
    text = (tmp_path / "workspace" / SCOPE_ID / "links.md").read_text(encoding="utf-8")
    assert text == "see https://example.com/report and http://s@Url.a/99"


def test_short_urls_left_alone_when_disabled(tmp_path) -> None:
    map_path = tmp_path / "short_urls.json"
    map_path.write_text(
        '{"task-1": {"http://s@Url.a/1": "https://example.com"}}', encoding="utf-8"
    )
    gateway = build_gateway(_settings(tmp_path, short_url_map_path=map_path))

    _run(gateway, "fs.write", {"file_path": "a.md", "contents": "http://s@Url.a/1"})

    text = (tmp_path / "workspace" / SCOPE_ID / "a.md").read_text(encoding="utf-8")
    assert text == "http://s@Url.a/1"
