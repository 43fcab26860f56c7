"""External interactions for versionmark.

This package wraps everything that touches the host:
- process: running tool version commands
- filesystem: safe path joins, capture file discovery, report writing
"""

from .filesystem import find_matching_files, safe_path_combine, write_text_file
from .process import run_version_command

__all__ = [
    "find_matching_files",
    "run_version_command",
    "safe_path_combine",
    "write_text_file",
]
