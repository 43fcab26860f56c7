"""Core logic for versionmark.

- capture: run version commands and extract versions into a VersionInfo
- markdown: group captures across jobs and render the markdown report
"""

from .capture import extract_version, find_versions
from .markdown import format_versions, group_versions

__all__ = [
    "extract_version",
    "find_versions",
    "format_versions",
    "group_versions",
]
