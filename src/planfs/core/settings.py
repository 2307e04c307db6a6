"""Settings loader for planfs."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_SUPPORTED_EXTENSIONS = frozenset(
    {
        ".txt", ".md", ".markdown", ".rst", ".log", ".csv", ".tsv",
        ".json", ".jsonl", ".yaml", ".yml", ".toml", ".xml", ".ini",
        ".cfg", ".conf", ".properties", ".env", ".html", ".htm", ".css",
        ".scss", ".less", ".js", ".mjs", ".cjs", ".ts", ".jsx", ".tsx",
        ".vue", ".py", ".java", ".kt", ".scala", ".go", ".rs", ".c",
        ".h", ".cpp", ".hpp", ".cc", ".cs", ".rb", ".php", ".pl", ".lua",
        ".r", ".swift", ".sh", ".bash", ".zsh", ".bat", ".ps1", ".sql",
        ".tex", ".svg",
    }
)

WORKSPACE_ROOT_KEY = "PLANFS_WORKSPACE_ROOT"
EXTERNAL_LINKED_FOLDER_KEY = "PLANFS_EXTERNAL_LINKED_FOLDER"


@dataclass(frozen=True)
class Settings:
    workspace_root: Path | None
    external_linked_folder: Path | None
    enable_short_url: bool
    short_url_map_path: Path | None
    supported_extensions: frozenset[str]
    confirm_tools: frozenset[str]
    deny_tools: frozenset[str]
    log_level: int


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    workspace_root = _parse_path(
        os.environ.get(WORKSPACE_ROOT_KEY, "~/.planfs/workspace")
    )
    external_linked_folder = _parse_path(
        os.environ.get(EXTERNAL_LINKED_FOLDER_KEY, "")
    )
    enable_short_url = _parse_bool(
        os.environ.get("PLANFS_ENABLE_SHORT_URL", "false"), "PLANFS_ENABLE_SHORT_URL"
    )
    short_url_map_path = _parse_path(os.environ.get("PLANFS_SHORT_URL_MAP", ""))
    raw_extensions = os.environ.get("PLANFS_SUPPORTED_EXTENSIONS", "")
    supported_extensions = (
        _parse_extensions(raw_extensions)
        if raw_extensions.strip()
        else DEFAULT_SUPPORTED_EXTENSIONS
    )
    confirm_tools = _parse_names(os.environ.get("PLANFS_CONFIRM_TOOLS", ""))
    deny_tools = _parse_names(os.environ.get("PLANFS_DENY_TOOLS", ""))
    log_level = _parse_log_level(
        os.environ.get("PLANFS_LOG_LEVEL", "WARNING"), "PLANFS_LOG_LEVEL"
    )

    return Settings(
        workspace_root=workspace_root,
        external_linked_folder=external_linked_folder,
        enable_short_url=enable_short_url,
        short_url_map_path=short_url_map_path,
        supported_extensions=supported_extensions,
        confirm_tools=confirm_tools,
        deny_tools=deny_tools,
        log_level=log_level,
    )


def _parse_path(value: str) -> Path | None:
    value = value.strip()
    if not value:
        return None
    return Path(value).expanduser()


def _parse_extensions(value: str) -> frozenset[str]:
    extensions = set()
    for item in value.split(","):
        item = item.strip().lower()
        if not item:
            continue
        extensions.add(item if item.startswith(".") else f".{item}")
    return frozenset(extensions)


def _parse_names(value: str) -> frozenset[str]:
    return frozenset(item.strip() for item in value.split(",") if item.strip())


def _parse_bool(value: str, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value}")


def _parse_log_level(value: str, name: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level for {name}: {value}")
    return level
