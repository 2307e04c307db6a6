"""Line, character and word statistics for a text file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from planfs.core.context import OperationContext
from planfs.core.errors import InvalidParameter, NotFound
from planfs.sandbox.paths import PathResolver
from planfs.tools.fs.common import SEPARATOR, file_operation, read_lines, resolve_file
from planfs.tools.requests import CountRequest
from planfs.tools.results import OperationResult

logger = logging.getLogger(__name__)

# Words are separated by ASCII whitespace only; NBSP and other Unicode spaces
# stay inside a word.
WHITESPACE = " \t\n\x0b\f\r"
WORD_SEPARATOR_RE = re.compile(f"[{re.escape(WHITESPACE)}]+")


@dataclass(frozen=True)
class FileStats:
    name: str
    lines: int
    size_bytes: int
    characters: int
    words: int

    def render(self) -> str:
        return "\n".join(
            [
                SEPARATOR,
                f"File Statistics for: {self.name}",
                SEPARATOR,
                f"Total Lines: {self.lines}",
                f"Total Characters (including newlines): {self.size_bytes}",
                f"Total Characters (excluding newlines): {self.characters}",
                f"Total Words: {self.words}",
                f"File Size: {self.size_bytes} bytes",
                SEPARATOR,
            ]
        )


def existing_regular_file(path: Path, raw_path: str | None, root_kind: str) -> Path:
    if not path.exists():
        raise NotFound(
            f"File does not exist: {raw_path}. "
            f"Please ensure the file exists in the {root_kind} directory."
        )
    if not path.is_file():
        raise InvalidParameter(f"Path is not a regular file: {raw_path}")
    return path


def count_words(line: str) -> int:
    stripped = line.strip(WHITESPACE)
    if not stripped:
        return 0
    return len(WORD_SEPARATOR_RE.split(stripped))


def collect_stats(path: Path) -> FileStats:
    lines = read_lines(path)
    return FileStats(
        name=path.name,
        lines=len(lines),
        size_bytes=path.stat().st_size,
        characters=sum(len(line) for line in lines),
        words=sum(count_words(line) for line in lines),
    )


@file_operation("count file")
def handle_count(
    request: CountRequest, context: OperationContext, resolver: PathResolver
) -> OperationResult:
    raw_path = context.expand(request.path)
    path = resolve_file(raw_path, context, resolver)
    existing_regular_file(path, raw_path, context.root_kind.value)

    stats = collect_stats(path)
    logger.info(
        "Counted file %s: %d lines, %d bytes, %d characters without newlines, %d words",
        raw_path,
        stats.lines,
        stats.size_bytes,
        stats.characters,
        stats.words,
    )
    return OperationResult.success(stats.render())
