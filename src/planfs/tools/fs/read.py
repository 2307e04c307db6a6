"""Read a text file as numbered lines."""

from __future__ import annotations

from planfs.core.context import OperationContext
from planfs.core.errors import InvalidParameter, NotFound
from planfs.sandbox.paths import PathResolver
from planfs.tools.fs.common import file_operation, read_lines, resolve_file
from planfs.tools.requests import ReadRequest
from planfs.tools.results import OperationResult

MAX_LINES_FOR_FULL_READ = 300


def format_lines(lines: list[str], start: int, end: int) -> str:
    return "".join(f"{index + 1:6d}|{lines[index]}\n" for index in range(start, end))


def oversized_advisory(lines: list[str]) -> str:
    char_count = sum(len(line) for line in lines) + len(lines)
    return (
        f"File is too large ({len(lines)} lines, {char_count} characters, "
        f"exceeds limit of {MAX_LINES_FOR_FULL_READ} lines). "
        "Please use one of the following approaches:\n"
        "1. Use offset and limit parameters to read specific line ranges "
        "(e.g., offset=1, limit=100)\n"
        "2. Use search functionality to find relevant sections\n"
        "3. Set bypass_limit=true to read the entire file "
        "(use with caution for very large files)\n\n"
        "Example: Read first 100 lines with offset=1, limit=100"
    )


def select_range(
    line_count: int, offset: int | None, limit: int | None
) -> tuple[int, int]:
    start = 0
    end = line_count
    if offset is not None:
        if offset < 1:
            raise InvalidParameter("offset must be >= 1 (line numbers start from 1)")
        if offset > line_count:
            raise InvalidParameter(
                f"offset exceeds file range (file has {line_count} lines)"
            )
        start = offset - 1
    if limit is not None:
        if limit < 1:
            raise InvalidParameter("limit must be >= 1")
        end = min(start + limit, line_count)
    return start, end


@file_operation("read file")
def handle_read(
    request: ReadRequest, context: OperationContext, resolver: PathResolver
) -> OperationResult:
    raw_path = context.expand(request.path)
    path = resolve_file(raw_path, context, resolver)
    if not path.exists():
        raise NotFound(f"File does not exist: {raw_path}")

    lines = read_lines(path)
    if not lines:
        return OperationResult.success("File is empty.")

    full_read = request.offset is None and request.limit is None
    if full_read and not request.bypass_limit and len(lines) > MAX_LINES_FOR_FULL_READ:
        return OperationResult.advisory(oversized_advisory(lines))

    start, end = select_range(len(lines), request.offset, request.limit)
    return OperationResult.success(format_lines(lines, start, end))
