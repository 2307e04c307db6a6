"""Delete a text file."""

from __future__ import annotations

import logging

from planfs.core.context import OperationContext
from planfs.core.errors import NotFound
from planfs.sandbox.paths import PathResolver
from planfs.tools.fs.common import file_operation, resolve_file
from planfs.tools.requests import DeleteRequest
from planfs.tools.results import OperationResult

logger = logging.getLogger(__name__)


@file_operation("delete file")
def handle_delete(
    request: DeleteRequest, context: OperationContext, resolver: PathResolver
) -> OperationResult:
    raw_path = context.expand(request.path)
    path = resolve_file(raw_path, context, resolver)
    if not path.exists():
        raise NotFound(f"File does not exist: {raw_path}")

    path.unlink()
    logger.info("Deleted file: %s", path)
    return OperationResult.success(f"File deleted successfully: {raw_path}")
