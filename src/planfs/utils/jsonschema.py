"""JSON Schema validation helpers."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError, best_match

from planfs.core.errors import FileToolError, InvalidParameter, MissingParameter


def validate_jsonschema(schema: dict[str, Any], data: dict[str, Any]) -> None:
    """Raise a file tool error for the most relevant schema violation."""
    error = best_match(Draft202012Validator(schema).iter_errors(data))
    if error is not None:
        raise _to_tool_error(error)


def _to_tool_error(error: ValidationError) -> FileToolError:
    if error.validator == "required":
        message = error.message.replace("is a required property", "parameter is required")
        return MissingParameter(message)
    location = ".".join(str(part) for part in error.path) or "arguments"
    return InvalidParameter(f"Invalid value for {location}: {error.message}")
