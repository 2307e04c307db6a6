"""Replace one unique occurrence of a string inside a text file."""

from __future__ import annotations

import logging

from planfs.core.context import OperationContext
from planfs.core.errors import Ambiguous, InvalidParameter, MissingParameter
from planfs.sandbox.paths import PathResolver
from planfs.tools.fs.common import (
    file_operation,
    read_text,
    resolve_file,
    write_text_durably,
)
from planfs.tools.requests import ReplaceRequest
from planfs.tools.results import OperationResult

logger = logging.getLogger(__name__)


def replace_unique(content: str, old_string: str, new_string: str, name: str) -> str:
    """Return ``content`` with its single ``old_string`` swapped for ``new_string``.

    Occurrences are counted without overlap; anything but exactly one match
    is an error so the caller has to widen ``old_string`` with more context.
    """
    if old_string not in content:
        raise InvalidParameter(f"old_string was not found in file: {name}")
    occurrences = content.count(old_string)
    if occurrences > 1:
        raise Ambiguous(
            f"old_string is not unique (found {occurrences} occurrences). "
            "Please provide a larger string with more surrounding context to "
            "make it unique, or use a more specific match."
        )
    return content.replace(old_string, new_string, 1)


@file_operation("replace text in file")
def handle_replace(
    request: ReplaceRequest, context: OperationContext, resolver: PathResolver
) -> OperationResult:
    raw_path = context.expand(request.path)
    old_string = context.expand(request.old_string)
    new_string = context.expand(request.new_string)
    if old_string is None or new_string is None:
        raise MissingParameter("old_string and new_string parameters are required")
    if old_string == new_string:
        raise InvalidParameter(
            "new_string must be different from old_string. No changes would be made."
        )
    path = resolve_file(raw_path, context, resolver)

    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        logger.info("Created new file automatically: %s", path)

    content = read_text(path)
    updated = replace_unique(content, old_string, new_string, raw_path)
    write_text_durably(path, updated)
    logger.info("Text replaced in file: %s", path)
    return OperationResult.success(f"Replacement successful in file: {raw_path}")
