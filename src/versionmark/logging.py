"""Logging configuration for versionmark CLI."""

import logging
from enum import IntEnum
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class LogLevel(IntEnum):
    """Log level enumeration."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    log_file: Path | None = None,
) -> Console:
    """Configure logging based on CLI options.

    Args:
        verbosity: Number of -v flags (0=normal, 1+=debug)
        quiet: Suppress non-error output (takes precedence over verbosity)
        no_color: Disable colored output
        log_file: Optional file that receives every log record as plain text

    Returns:
        Configured Rich console for output

    Note:
        Flag precedence: quiet > verbosity
    """
    if quiet:
        level = LogLevel.QUIET
    elif verbosity >= 1:
        level = LogLevel.VERBOSE
    else:
        level = LogLevel.NORMAL

    console = Console(
        stderr=True,
        force_terminal=not no_color,
        no_color=no_color,
    )

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            show_time=verbosity >= 2,
            show_path=verbosity >= 2,
        )
    ]
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True,
    )

    return console
