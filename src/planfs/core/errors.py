"""Typed failures raised by file tools."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    MISSING_PARAMETER = "missing_parameter"
    INVALID_PARAMETER = "invalid_parameter"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"
    SIZE_LIMIT_EXCEEDED = "size_limit_exceeded"
    IO_FAILURE = "io_failure"


class FileToolError(Exception):
    kind = ErrorKind.IO_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def render(self) -> str:
        return f"Error: {self.message}"


class ConfigurationError(FileToolError):
    """A sandbox root or the scope identifier is not configured.

    ``setting`` names what the caller has to configure; it is appended to the
    rendered message as a remediation hint no matter which tool failed.
    """

    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, setting: str) -> None:
        super().__init__(message)
        self.setting = setting

    def render(self) -> str:
        return (
            f"Error: {self.message}. Please configure '{self.setting}' "
            "before using file tools."
        )


class MissingParameter(FileToolError):
    kind = ErrorKind.MISSING_PARAMETER


class InvalidParameter(FileToolError):
    kind = ErrorKind.INVALID_PARAMETER


class AccessDenied(FileToolError):
    kind = ErrorKind.ACCESS_DENIED


class NotFound(FileToolError):
    kind = ErrorKind.NOT_FOUND


class Ambiguous(FileToolError):
    kind = ErrorKind.AMBIGUOUS


class IOFailure(FileToolError):
    kind = ErrorKind.IO_FAILURE
