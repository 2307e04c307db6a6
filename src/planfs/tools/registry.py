"""Tool registry and specifications."""

from __future__ import annotations

from dataclasses import dataclass, field

from planfs.core.policy import RiskLevel
from planfs.sandbox.roots import RootKind
from planfs.services.descriptions import DescriptionLookup, describe_tool

PATH_PROPERTIES: dict[str, object] = {
    "file_path": {"type": "string"},
    "path": {"type": "string"},
}

OPERATION_SCHEMAS: dict[str, dict[str, object]] = {
    "read": {
        "type": "object",
        "properties": {
            **PATH_PROPERTIES,
            "offset": {"type": "integer"},
            "limit": {"type": "integer"},
            "bypass_limit": {"type": "boolean"},
        },
        "required": [],
    },
    "write": {
        "type": "object",
        "properties": {**PATH_PROPERTIES, "contents": {"type": "string"}},
        "required": ["contents"],
    },
    "replace": {
        "type": "object",
        "properties": {
            **PATH_PROPERTIES,
            "old_string": {"type": "string"},
            "new_string": {"type": "string"},
        },
        "required": ["old_string", "new_string"],
    },
    "delete": {
        "type": "object",
        "properties": dict(PATH_PROPERTIES),
        "required": [],
    },
    "list": {
        "type": "object",
        "properties": dict(PATH_PROPERTIES),
        "required": [],
    },
    "count": {
        "type": "object",
        "properties": dict(PATH_PROPERTIES),
        "required": [],
    },
    "split": {
        "type": "object",
        "properties": {
            **PATH_PROPERTIES,
            "header": {"type": "string"},
            "split_count": {"type": "integer"},
        },
        "required": [],
    },
}

OPERATION_RISK = {
    "read": RiskLevel.SAFE,
    "list": RiskLevel.SAFE,
    "count": RiskLevel.SAFE,
    "write": RiskLevel.CONFIRM,
    "replace": RiskLevel.CONFIRM,
    "delete": RiskLevel.CONFIRM,
    "split": RiskLevel.CONFIRM,
}

TOOL_PREFIXES = {
    RootKind.WORKSPACE: "fs",
    RootKind.EXTERNAL_LINK: "fs_ext",
}


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    args_schema: dict[str, object]
    risk_level: RiskLevel
    root_kind: RootKind
    operation: str
    caps: set[str] = field(default_factory=set)


class ToolRegistry:
    def __init__(self) -> None:
        self._specs: dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._specs:
            raise ValueError(f"Tool already registered: {spec.name}")
        self._specs[spec.name] = spec

    def get(self, name: str) -> ToolSpec:
        if name not in self._specs:
            raise KeyError(f"Tool not registered: {name}")
        return self._specs[name]

    def list_specs(self) -> list[ToolSpec]:
        return list(self._specs.values())


def tool_name(root_kind: RootKind, operation: str) -> str:
    return f"{TOOL_PREFIXES[root_kind]}.{operation}"


def register_file_tools(
    registry: ToolRegistry, describe: DescriptionLookup | None = None
) -> None:
    for root_kind in RootKind:
        for operation, schema in OPERATION_SCHEMAS.items():
            name = tool_name(root_kind, operation)
            risk_level = OPERATION_RISK[operation]
            caps = {"fs_read"} if risk_level is RiskLevel.SAFE else {"fs_write"}
            registry.register(
                ToolSpec(
                    name=name,
                    description=describe_tool(
                        name, operation, root_kind.value, describe
                    ),
                    args_schema=schema,
                    risk_level=risk_level,
                    root_kind=root_kind,
                    operation=operation,
                    caps=caps | {root_kind.value},
                )
            )
