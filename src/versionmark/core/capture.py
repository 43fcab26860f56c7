"""Version capture engine.

Runs each requested tool's version command in turn, extracts the version
with the tool's regex, and returns a single VersionInfo. The first failure
aborts the whole capture.
"""

import logging
from collections.abc import Iterable

import regex

from ..config import Platform, VersionMarkConfig
from ..constants import REGEX_TIMEOUT
from ..errors import ToolNotFoundError, VersionExtractionError
from ..models import VersionInfo
from ..services import run_version_command

logger = logging.getLogger(__name__)

VERSION_GROUP = "version"


def extract_version(
    tool_name: str,
    pattern: str,
    output: str,
    timeout: float = REGEX_TIMEOUT,
) -> str:
    """Extract the 'version' group of pattern from command output.

    Both ``(?<version>...)`` and ``(?P<version>...)`` group syntax are accepted.

    Args:
        tool_name: Tool being captured (used in error messages)
        pattern: Regex containing a named 'version' group
        output: Command output to search
        timeout: Maximum seconds to spend matching

    Returns:
        The text captured by the 'version' group, unmodified

    Raises:
        VersionExtractionError: If the pattern is invalid, has no 'version'
            group, does not match, or matching times out
    """
    prefix = f"Failed to extract version for tool '{tool_name}'"

    try:
        compiled = regex.compile(pattern)
    except regex.error as e:
        raise VersionExtractionError(tool_name, f"{prefix}: invalid regex '{pattern}': {e}") from e

    try:
        match = compiled.search(output, timeout=timeout)
    except TimeoutError as e:
        raise VersionExtractionError(
            tool_name, f"{prefix}: regex timed out after {timeout} seconds"
        ) from e

    if match is None:
        raise VersionExtractionError(
            tool_name, f"{prefix}: regex '{pattern}' did not match command output"
        )
    if VERSION_GROUP not in compiled.groupindex:
        raise VersionExtractionError(
            tool_name,
            f"{prefix}: regex '{pattern}' must contain a named '{VERSION_GROUP}' capture group",
        )

    version = match.group(VERSION_GROUP)
    if version is None:
        raise VersionExtractionError(
            tool_name, f"{prefix}: '{VERSION_GROUP}' group did not participate in the match"
        )
    return version


def find_versions(
    config: VersionMarkConfig,
    tool_names: Iterable[str],
    job_id: str,
    platform: Platform | None = None,
    timeout: float | None = None,
) -> VersionInfo:
    """Capture the versions of the named tools.

    Tools are processed sequentially in the given order.

    Args:
        config: Loaded configuration
        tool_names: Tools to capture; each must be defined in config
        job_id: Identifier of the job, stored verbatim
        platform: Platform used to resolve overrides (detected when omitted)
        timeout: Per-command timeout in seconds (default: CAPTURE_TIMEOUT)

    Returns:
        VersionInfo with one entry per requested tool

    Raises:
        ToolNotFoundError: If a tool is not defined in config
        CommandExecutionError: If a version command fails
        VersionExtractionError: If a version cannot be extracted
    """
    versions: dict[str, str] = {}
    for tool_name in tool_names:
        tool = config.tools.get(tool_name)
        if tool is None:
            raise ToolNotFoundError(tool_name)

        command = tool.get_effective_command(platform)
        pattern = tool.get_effective_regex(platform)

        output = run_version_command(tool_name, command, timeout=timeout)
        versions[tool_name] = extract_version(tool_name, pattern, output)
        logger.debug(f"Captured {tool_name}: {versions[tool_name]}")

    return VersionInfo(job_id=job_id, versions=versions)
