"""Create or overwrite a text file."""

from __future__ import annotations

import logging

from planfs.core.context import OperationContext
from planfs.sandbox.paths import PathResolver
from planfs.tools.fs.common import (
    file_operation,
    require,
    resolve_file,
    write_text_durably,
)
from planfs.tools.requests import WriteRequest
from planfs.tools.results import OperationResult

logger = logging.getLogger(__name__)


@file_operation("write file")
def handle_write(
    request: WriteRequest, context: OperationContext, resolver: PathResolver
) -> OperationResult:
    raw_path = context.expand(request.path)
    contents = require(context.expand(request.contents), "contents")
    path = resolve_file(raw_path, context, resolver)

    existed = path.exists()
    path.parent.mkdir(parents=True, exist_ok=True)
    write_text_durably(path, contents)

    outcome = "overwritten" if existed else "created"
    logger.info("File written (%s): %s", outcome, path)
    return OperationResult.success(f"File written successfully ({outcome}): {raw_path}")
