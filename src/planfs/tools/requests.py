"""Request variants for the file operations.

Each variant carries a ``kind`` tag; handlers are looked up by that tag. Wire
arguments use the parameter names agents send (``file_path``/``path``,
``offset``, ``limit``, ``bypass_limit``, ``old_string``, ``new_string``,
``contents``, ``header``, ``split_count``).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class ReadRequest:
    kind: ClassVar[str] = "read"
    path: str | None
    offset: int | None = None
    limit: int | None = None
    bypass_limit: bool = False


@dataclass(frozen=True)
class WriteRequest:
    kind: ClassVar[str] = "write"
    path: str | None
    contents: str | None


@dataclass(frozen=True)
class ReplaceRequest:
    kind: ClassVar[str] = "replace"
    path: str | None
    old_string: str | None
    new_string: str | None


@dataclass(frozen=True)
class DeleteRequest:
    kind: ClassVar[str] = "delete"
    path: str | None


@dataclass(frozen=True)
class ListRequest:
    kind: ClassVar[str] = "list"
    path: str | None = None


@dataclass(frozen=True)
class CountRequest:
    kind: ClassVar[str] = "count"
    path: str | None


@dataclass(frozen=True)
class SplitRequest:
    kind: ClassVar[str] = "split"
    path: str | None
    header: str | None = None
    split_count: int | None = None


FileRequest = Union[
    ReadRequest,
    WriteRequest,
    ReplaceRequest,
    DeleteRequest,
    ListRequest,
    CountRequest,
    SplitRequest,
]


def _path(args: Mapping[str, Any]) -> str | None:
    path = args.get("path")
    return path if path is not None else args.get("file_path")


_BUILDERS: dict[str, Callable[[Mapping[str, Any]], FileRequest]] = {
    "read": lambda args: ReadRequest(
        path=_path(args),
        offset=args.get("offset"),
        limit=args.get("limit"),
        bypass_limit=bool(args.get("bypass_limit") or False),
    ),
    "write": lambda args: WriteRequest(path=_path(args), contents=args.get("contents")),
    "replace": lambda args: ReplaceRequest(
        path=_path(args),
        old_string=args.get("old_string"),
        new_string=args.get("new_string"),
    ),
    "delete": lambda args: DeleteRequest(path=_path(args)),
    "list": lambda args: ListRequest(path=_path(args)),
    "count": lambda args: CountRequest(path=_path(args)),
    "split": lambda args: SplitRequest(
        path=_path(args),
        header=args.get("header"),
        split_count=args.get("split_count"),
    ),
}

REQUEST_KINDS = tuple(_BUILDERS)


def request_from_args(kind: str, args: Mapping[str, Any]) -> FileRequest:
    if kind not in _BUILDERS:
        raise KeyError(f"Unknown file operation: {kind}")
    return _BUILDERS[kind](args)
