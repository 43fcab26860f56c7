"""Errors raised by versionmark.

Every error is fatal to the command that raised it. The CLI reports the
message on a single line and exits non-zero.
"""

from pydantic import ValidationError


class VersionMarkError(Exception):
    """Base exception for versionmark errors."""


class ConfigurationError(VersionMarkError):
    """Raised when the configuration document is missing, malformed, or empty."""


class ToolNotFoundError(VersionMarkError):
    """Raised when a requested tool is not defined in the configuration."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Tool '{tool_name}' not found in configuration")


class CommandExecutionError(VersionMarkError):
    """Raised when a version command cannot be run or exits abnormally."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(message)


class VersionExtractionError(VersionMarkError):
    """Raised when a version cannot be extracted from command output."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(message)


class AggregationInputError(VersionMarkError):
    """Raised when capture files for a report cannot be found or loaded."""


class UnsafePathError(VersionMarkError):
    """Raised when a path component would escape its base directory."""


class OutputError(VersionMarkError):
    """Raised when a capture file or report cannot be written."""


def single_line(text: str) -> str:
    """Collapse runs of whitespace, including newlines, into single spaces."""
    return " ".join(text.split())


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic ValidationError as ``loc: msg`` pairs on one line."""
    parts = []
    for err in error.errors(include_url=False):
        loc = ".".join(str(part) for part in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return single_line("; ".join(parts))
