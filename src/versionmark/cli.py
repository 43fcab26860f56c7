"""VersionMark CLI: capture tool versions in CI jobs and publish a report."""

from pathlib import Path

import typer

from versionmark import __version__

from .commands import capture, publish
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"versionmark {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="versionmark",
    help="Capture tool versions across CI jobs and publish them as markdown",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log",
        help="Write log records to this file",
    ),
) -> None:
    """VersionMark - tool version capture and reporting for CI."""
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
        log_file=log_file,
    )
    set_output_context(OutputContext(console=console, json_mode=json_output, quiet=quiet))


app.command("capture")(capture)
app.command("publish")(publish)


if __name__ == "__main__":
    app()
