"""Markdown report generation for captured tool versions."""

from collections.abc import Iterable

from ..constants import DEFAULT_REPORT_DEPTH
from ..models import VersionInfo

REPORT_TITLE = "Tool Versions"


def _sort_key(value: str) -> str:
    # Ordinal, case-insensitive
    return value.upper()


def group_versions(records: Iterable[VersionInfo]) -> dict[str, dict[str, list[str]]]:
    """Group job IDs by tool and then by reported version.

    Returns:
        ``{tool: {version: [job_id, ...]}}`` in first-seen order
    """
    grouped: dict[str, dict[str, list[str]]] = {}
    for record in records:
        for tool, version in record.versions.items():
            grouped.setdefault(tool, {}).setdefault(version, []).append(record.job_id)
    return grouped


def format_tool_lines(tool: str, versions: dict[str, list[str]]) -> list[str]:
    """Render the bullet line(s) for one tool.

    A tool reporting a single version across all jobs gets one bullet with
    no job IDs. Otherwise each version gets its own bullet followed by the
    jobs that reported it.
    """
    if len(versions) == 1:
        (version,) = versions
        return [f"- **{tool}**: {version}"]

    lines = []
    for version in sorted(versions, key=_sort_key):
        job_ids = ", ".join(sorted(versions[version], key=_sort_key))
        lines.append(f"- **{tool}**: {version} ({job_ids})")
    return lines


def format_versions(
    records: Iterable[VersionInfo],
    report_depth: int = DEFAULT_REPORT_DEPTH,
) -> str:
    """Format capture records as a markdown report.

    Args:
        records: Capture records, one per job
        report_depth: Heading level of the report title (1 or more)

    Returns:
        Markdown text: a heading, a blank line, then one or more bullets
        per tool in case-insensitive alphabetical order

    Raises:
        ValueError: If report_depth is less than 1
    """
    if report_depth < 1:
        raise ValueError(f"report_depth must be at least 1, got {report_depth}")

    grouped = group_versions(records)

    lines = [f"{'#' * report_depth} {REPORT_TITLE}", ""]
    for tool in sorted(grouped, key=_sort_key):
        lines.extend(format_tool_lines(tool, grouped[tool]))
    return "\n".join(lines) + "\n"
