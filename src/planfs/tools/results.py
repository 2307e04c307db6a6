"""Structured results returned by file operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from planfs.core.errors import ErrorKind, FileToolError


class Status(str, Enum):
    OK = "ok"
    ADVISORY = "advisory"
    ERROR = "error"


@dataclass(frozen=True)
class OperationResult:
    status: Status
    text: str
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.status is not Status.ERROR

    @classmethod
    def success(cls, text: str) -> OperationResult:
        return cls(Status.OK, text)

    @classmethod
    def advisory(cls, text: str) -> OperationResult:
        return cls(Status.ADVISORY, text, ErrorKind.SIZE_LIMIT_EXCEEDED)

    @classmethod
    def failure(cls, exc: FileToolError) -> OperationResult:
        return cls(Status.ERROR, exc.render(), exc.kind)
