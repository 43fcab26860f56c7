"""Publish command implementation."""

from pathlib import Path

import typer
from rich.markup import escape

from ..constants import DEFAULT_CAPTURE_PATTERN, DEFAULT_REPORT_DEPTH
from ..core import format_versions
from ..errors import AggregationInputError, VersionMarkError
from ..models import VersionInfo
from ..output import get_output_context
from ..services import find_matching_files, write_text_file


def load_version_infos(paths: list[Path]) -> list[VersionInfo]:
    """Load every capture file, failing on the first bad one."""
    return [VersionInfo.load_from_file(path) for path in paths]


def publish(
    patterns: list[str] | None = typer.Argument(
        None,
        help=f"Glob patterns for capture files (default: {DEFAULT_CAPTURE_PATTERN})",
        show_default=False,
    ),
    report: Path = typer.Option(..., "--report", "-r", help="Output markdown file"),
    report_depth: int = typer.Option(
        DEFAULT_REPORT_DEPTH,
        "--report-depth",
        min=1,
        help="Heading depth for the report title",
    ),
) -> None:
    """Generate a markdown report from captured version files."""
    ctx = get_output_context()
    glob_patterns = patterns or [DEFAULT_CAPTURE_PATTERN]

    ctx.print(f"Publishing version report to '{escape(str(report))}'...")
    ctx.print(f"Searching for JSON files with patterns: {escape(', '.join(glob_patterns))}")

    try:
        files = find_matching_files(glob_patterns, Path.cwd())
        if not files:
            raise AggregationInputError(
                f"No JSON files found matching patterns: {', '.join(glob_patterns)}"
            )
        ctx.print(f"Found {len(files)} JSON file(s)")

        version_infos = load_version_infos(files)
        markdown = format_versions(version_infos, report_depth)
        write_text_file(report, markdown)
    except VersionMarkError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    ctx.success(
        f"Report successfully written to {report}",
        {
            "report": str(report),
            "files": [str(f) for f in files],
            "tools": sorted({tool for info in version_infos for tool in info.versions}),
        },
    )
