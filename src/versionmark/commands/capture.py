"""Capture command implementation."""

from pathlib import Path

import typer
from rich.markup import escape

from ..config import load_config
from ..constants import CAPTURE_FILE_PREFIX, CAPTURE_TIMEOUT, DEFAULT_CONFIG_FILE
from ..core import find_versions
from ..errors import VersionMarkError
from ..output import get_output_context
from ..services import safe_path_combine


def default_output_path(job_id: str, base_dir: Path) -> Path:
    """Get the default capture file path for a job."""
    return safe_path_combine(base_dir, f"{CAPTURE_FILE_PREFIX}-{job_id}.json")


def capture(
    tools: list[str] | None = typer.Argument(
        None,
        help="Tools to capture (default: all configured tools)",
        show_default=False,
    ),
    job_id: str = typer.Option(..., "--job-id", "-j", help="Job ID for this capture"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Output JSON file (default: {CAPTURE_FILE_PREFIX}-<job-id>.json)",
    ),
    config_path: Path = typer.Option(
        Path(DEFAULT_CONFIG_FILE),
        "--config",
        "-c",
        help="Configuration file",
    ),
    timeout: float = typer.Option(
        CAPTURE_TIMEOUT,
        "--timeout",
        min=0.1,
        help="Timeout in seconds for each version command",
    ),
) -> None:
    """Capture tool versions for a CI job."""
    ctx = get_output_context()

    if not job_id:
        ctx.error("--job-id must not be empty")
        raise typer.Exit(1)

    try:
        output_path = output or default_output_path(job_id, Path.cwd())

        ctx.print(f"Capturing tool versions for job '{escape(job_id)}'...")
        ctx.print(f"Output file: {escape(str(output_path))}")

        config = load_config(config_path)
        tool_names = tools or list(config.tools)
        ctx.print(f"Capturing {len(tool_names)} tool(s)...")

        version_info = find_versions(config, tool_names, job_id, timeout=timeout)
        version_info.save_to_file(output_path)
    except VersionMarkError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    ctx.print("\n[bold]Captured versions:[/bold]")
    for tool, version in version_info.versions.items():
        ctx.print(f"  {escape(tool)}: {escape(version)}")

    ctx.success(
        f"Version information saved to {output_path}",
        {
            "job_id": version_info.job_id,
            "versions": version_info.versions,
            "output": str(output_path),
        },
    )
