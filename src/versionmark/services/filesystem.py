"""Filesystem helpers for capture and report files.

Capture file names and report input patterns come from the command line,
so anything joined onto a base directory goes through safe_path_combine.
"""

from collections.abc import Iterable
from pathlib import Path, PurePath

from ..errors import OutputError, UnsafePathError


def _check_relative(relative: str) -> None:
    pure = PurePath(relative)
    if pure.anchor or pure.is_absolute() or ".." in pure.parts:
        raise UnsafePathError(f"Invalid path component: {relative}")


def safe_path_combine(base: Path, relative: str) -> Path:
    """Join a relative path onto base, refusing anything that escapes it.

    Args:
        base: Base directory
        relative: Relative path supplied by the caller

    Returns:
        The combined path (not resolved)

    Raises:
        UnsafePathError: If relative is absolute, contains '..' segments, or
            resolves outside base
    """
    _check_relative(relative)
    combined = base / relative

    base_resolved = base.resolve()
    if not combined.resolve().is_relative_to(base_resolved):
        raise UnsafePathError(f"Invalid path component: {relative}")
    return combined


def find_matching_files(patterns: Iterable[str], base_dir: Path) -> list[Path]:
    """Find files under base_dir matching any of the glob patterns.

    Args:
        patterns: Glob patterns relative to base_dir ('**' is supported)
        base_dir: Directory the patterns are evaluated against

    Returns:
        Absolute paths of matching files, de-duplicated and sorted
        case-insensitively

    Raises:
        UnsafePathError: If a pattern is absolute or contains '..' segments
    """
    base_resolved = base_dir.resolve()
    matches: set[Path] = set()
    for pattern in patterns:
        if not pattern:
            raise UnsafePathError("Invalid path component: empty pattern")
        _check_relative(pattern)
        for path in base_resolved.glob(pattern):
            if path.is_file() and path.resolve().is_relative_to(base_resolved):
                matches.add(path)
    return sorted(matches, key=lambda p: str(p).upper())


def write_text_file(path: Path, content: str) -> None:
    """Write UTF-8 text, creating parent directories.

    Raises:
        OutputError: If the file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write file '{path}': {e}") from e
