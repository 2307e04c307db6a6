"""Split a text file into numbered sibling pieces."""

from __future__ import annotations

import logging
import posixpath

from planfs.core.context import OperationContext
from planfs.core.errors import InvalidParameter
from planfs.sandbox.paths import PathResolver, normalize
from planfs.tools.fs.common import SEPARATOR, file_operation, read_lines, resolve_file
from planfs.tools.fs.count import existing_regular_file
from planfs.tools.requests import SplitRequest
from planfs.tools.results import OperationResult

logger = logging.getLogger(__name__)

DEFAULT_SPLIT_COUNT = 10


def piece_sizes(total: int, count: int) -> list[int]:
    """Line counts per piece; the first ``total % count`` pieces get one extra."""
    base, remainder = divmod(total, count)
    return [base + 1 if index < remainder else base for index in range(count)]


def split_pieces(lines: list[str], count: int) -> list[tuple[int, list[str]]]:
    pieces = []
    start = 0
    for index, size in enumerate(piece_sizes(len(lines), count)):
        if size == 0:
            continue
        pieces.append((index, lines[start : start + size]))
        start += size
    return pieces


def split_name(file_name: str) -> tuple[str, str]:
    index = file_name.rfind(".")
    if index > 0:
        return file_name[:index], file_name[index:]
    return file_name, ""


def render_piece(header: str, piece: list[str], ends_file: bool) -> str:
    body = "\n".join(piece)
    if not ends_file:
        body += "\n"
    return f"{header}\n{body}" if header else body


@file_operation("split file")
def handle_split(
    request: SplitRequest, context: OperationContext, resolver: PathResolver
) -> OperationResult:
    split_count = (
        DEFAULT_SPLIT_COUNT if request.split_count is None else request.split_count
    )
    if split_count <= 0:
        raise InvalidParameter("split_count must be a positive integer")
    raw_path = context.expand(request.path)
    header = (context.expand(request.header) or "").strip()
    source = resolve_file(raw_path, context, resolver)
    existing_regular_file(source, raw_path, context.root_kind.value)

    lines = read_lines(source)
    if not lines:
        raise InvalidParameter("File is empty, cannot split")

    base_name, extension = split_name(source.name)
    directory = posixpath.dirname(normalize(raw_path).rstrip("/"))
    pieces = split_pieces(lines, split_count)
    # All pieces are resolved before the first write.
    targets = [
        resolver.resolve(
            context.scope_id,
            posixpath.join(directory, f"{index}-{base_name}{extension}"),
            context.root_kind,
        )
        for index, _ in pieces
    ]
    created = []
    for position, ((_, piece), target) in enumerate(zip(pieces, targets)):
        ends_file = position == len(pieces) - 1
        target.write_text(render_piece(header, piece, ends_file), encoding="utf-8")
        created.append(target.name)
        logger.info("Created split file %s with %d lines", target.name, len(piece))

    result = [
        f"Successfully split file '{source.name}' into {len(created)} pieces:",
        SEPARATOR,
    ]
    result.extend(f"  - {name}" for name in created)
    result.append("")
    result.append(f"Total lines in original file: {len(lines)}")
    result.append(f"Lines per piece: approximately {len(lines) // split_count}")
    if header:
        result.append("Header added to each split file")
    return OperationResult.success("\n".join(result) + "\n")
