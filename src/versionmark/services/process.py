"""Version command runner for versionmark."""

import logging
import os
import signal
import subprocess

from ..constants import CAPTURE_TIMEOUT
from ..errors import CommandExecutionError, single_line

logger = logging.getLogger(__name__)

# Output included in error messages is truncated to this many characters
MAX_ERROR_OUTPUT = 200


def _kill(proc: subprocess.Popen[str]) -> None:
    """Kill the shell and everything it started."""
    if os.name == "nt":
        proc.kill()
        return
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


def run_version_command(
    tool_name: str,
    command: str,
    timeout: float | None = None,
) -> str:
    """Run a version command through the shell and return its combined stdout/stderr.

    Args:
        tool_name: Tool the command belongs to (used in error messages)
        command: Shell command line to run (pipes and redirects are allowed)
        timeout: Optional timeout in seconds (default: CAPTURE_TIMEOUT)

    Returns:
        Combined output of the command

    Raises:
        CommandExecutionError: If the command is empty, cannot be launched,
            times out, or exits with a non-zero code
    """
    timeout = timeout or CAPTURE_TIMEOUT
    prefix = f"Failed to run command '{command}' for tool '{tool_name}'"

    if not command.strip():
        raise CommandExecutionError(tool_name, f"{prefix}: command is empty")

    logger.debug(f"Running {tool_name}: {command}")
    try:
        with subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            text=True,
            errors="replace",
            start_new_session=os.name != "nt",
        ) as proc:
            try:
                output, _ = proc.communicate(timeout=timeout)
            except subprocess.TimeoutExpired as e:
                _kill(proc)
                proc.communicate()
                raise CommandExecutionError(
                    tool_name, f"{prefix}: timed out after {timeout} seconds"
                ) from e
    except OSError as e:
        raise CommandExecutionError(tool_name, f"{prefix}: {e}") from e

    output = output or ""
    if proc.returncode != 0:
        detail = single_line(output)[:MAX_ERROR_OUTPUT]
        message = f"{prefix}: exit code {proc.returncode}"
        if detail:
            message += f": {detail}"
        raise CommandExecutionError(tool_name, message)

    logger.debug(f"{tool_name} output: {output.strip()}")
    return output
