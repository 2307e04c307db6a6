"""Route file requests to their handlers."""

from __future__ import annotations

import logging

from planfs.core.context import OperationContext
from planfs.core.errors import ErrorKind, FileToolError
from planfs.sandbox.paths import PathResolver
from planfs.tools.fs.common import Handler
from planfs.tools.fs.count import handle_count
from planfs.tools.fs.delete import handle_delete
from planfs.tools.fs.listing import handle_list
from planfs.tools.fs.read import handle_read
from planfs.tools.fs.replace import handle_replace
from planfs.tools.fs.split import handle_split
from planfs.tools.fs.write import handle_write
from planfs.tools.requests import FileRequest
from planfs.tools.results import OperationResult, Status

logger = logging.getLogger(__name__)

HANDLERS: dict[str, Handler] = {
    "read": handle_read,
    "write": handle_write,
    "replace": handle_replace,
    "delete": handle_delete,
    "list": handle_list,
    "count": handle_count,
    "split": handle_split,
}


def dispatch(
    request: FileRequest, context: OperationContext, resolver: PathResolver
) -> OperationResult:
    logger.info(
        "%s request in %s for scope %s: path=%s",
        request.kind,
        context.root_kind.value,
        context.scope_id,
        request.path,
    )
    handler = HANDLERS[request.kind]
    try:
        return handler(request, context, resolver)
    except FileToolError as exc:
        return OperationResult.failure(exc)
    except Exception as exc:
        logger.exception("%s operation failed", request.kind)
        return OperationResult(
            Status.ERROR, f"Tool execution failed: {exc}", ErrorKind.IO_FAILURE
        )
