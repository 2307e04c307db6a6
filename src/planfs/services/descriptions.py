"""Human-facing tool descriptions."""

from __future__ import annotations

from collections.abc import Callable

DescriptionLookup = Callable[[str], "str | None"]

_OPERATION_DESCRIPTIONS = {
    "read": (
        "Read a text file from the {root}. Returns lines as LINE|CONTENT. "
        "Files over 300 lines need offset/limit or bypass_limit=true"
    ),
    "write": "Create or overwrite a text file in the {root}",
    "replace": (
        "Replace one unique occurrence of old_string with new_string in a "
        "text file in the {root}"
    ),
    "delete": "Delete a text file from the {root}",
    "list": "List the direct children of a directory in the {root}",
    "count": "Count lines, characters and words of a text file in the {root}",
    "split": (
        "Split a text file in the {root} into numbered pieces next to it, "
        "optionally prefixing each piece with a header"
    ),
}

_ROOT_LABELS = {
    "workspace": "task workspace",
    "external_link": "external linked folder",
}


def default_description(operation: str, root_kind: str) -> str:
    return _OPERATION_DESCRIPTIONS[operation].format(root=_ROOT_LABELS[root_kind])


def describe_tool(
    tool_name: str,
    operation: str,
    root_kind: str,
    lookup: DescriptionLookup | None = None,
) -> str:
    if lookup is not None:
        text = lookup(tool_name)
        if text:
            return text
    return default_description(operation, root_kind)
