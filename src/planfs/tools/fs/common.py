"""Helpers shared by the file operation handlers."""

from __future__ import annotations

import functools
import logging
import os
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from planfs.core.context import OperationContext
from planfs.core.errors import (
    AccessDenied,
    ConfigurationError,
    FileToolError,
    IOFailure,
    MissingParameter,
)
from planfs.sandbox.paths import PathResolver, is_supported_type, normalize
from planfs.tools.results import OperationResult

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
SEPARATOR = "=" * 60

RequestT = TypeVar("RequestT")
Handler = Callable[[Any, OperationContext, PathResolver], OperationResult]


def split_lines(text: str) -> list[str]:
    """Split on any line terminator; a trailing terminator adds no empty line."""
    if not text:
        return []
    lines = LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def read_text(path: Path) -> str:
    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


def read_lines(path: Path) -> list[str]:
    return split_lines(read_text(path))


def write_text_durably(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
        handle.flush()
        os.fsync(handle.fileno())


def require(value: str | None, name: str) -> str:
    if value is None:
        raise MissingParameter(f"{name} parameter is required")
    return value


def resolve_file(
    raw_path: str | None, context: OperationContext, resolver: PathResolver
) -> Path:
    """Validate, normalize and resolve the path of a single-file operation."""
    if raw_path is None or not raw_path.strip():
        raise MissingParameter("file_path parameter is required")
    normalized = normalize(raw_path)
    if not is_supported_type(normalized, context.supported_extensions):
        raise AccessDenied("Unsupported file type. Only text-based files are supported.")
    return resolver.resolve(context.scope_id, normalized, context.root_kind)


def file_operation(
    action: str,
) -> Callable[[Callable[[RequestT, OperationContext, PathResolver], OperationResult]], Handler]:
    """Turn failures of a handler's own filesystem work into results."""

    def decorator(
        func: Callable[[RequestT, OperationContext, PathResolver], OperationResult],
    ) -> Handler:
        @functools.wraps(func)
        def wrapper(
            request: RequestT, context: OperationContext, resolver: PathResolver
        ) -> OperationResult:
            path = getattr(request, "path", None)
            try:
                return func(request, context, resolver)
            except ConfigurationError as exc:
                logger.error("Cannot %s %s: %s", action, path, exc.message)
                return OperationResult.failure(exc)
            except FileToolError as exc:
                logger.info("Cannot %s %s: %s", action, path, exc.message)
                return OperationResult.failure(exc)
            except UnicodeDecodeError:
                return OperationResult.failure(
                    IOFailure(
                        f"File '{path}' appears to be binary. "
                        "Only text files are supported."
                    )
                )
            except OSError as exc:
                logger.exception("Error trying to %s: %s", action, path)
                return OperationResult.failure(
                    IOFailure(f"Could not {action} '{path}': {exc.strerror or exc}")
                )

        return wrapper

    return decorator
