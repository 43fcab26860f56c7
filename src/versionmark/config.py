"""Configuration management for versionmark.

The configuration document is YAML::

    tools:
      dotnet:
        command: dotnet --version
        regex: (?<version>\\d+\\.\\d+\\.\\d+)
      gcc:
        command: gcc --version
        command-win: gcc.exe --version
        regex: gcc.*?(?<version>\\d+\\.\\d+\\.\\d+)

Each ``command-<os>`` / ``regex-<os>`` key overrides the default for one
platform.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ConfigurationError, describe_validation_error, single_line

logger = logging.getLogger(__name__)


class Platform(str, Enum):
    """Platforms that can carry command/regex overrides."""

    WIN = "win"
    LINUX = "linux"
    MACOS = "macos"


def current_platform() -> Platform | None:
    """Detect the running platform, or None if it is not a known one."""
    if sys.platform.startswith(("win", "cygwin")):
        return Platform.WIN
    if sys.platform.startswith("linux"):
        return Platform.LINUX
    if sys.platform == "darwin":
        return Platform.MACOS
    return None


_PLATFORM_KEYS = frozenset(p.value for p in Platform)


def _resolve(default: str, overrides: dict[Platform, str], platform: Platform | str) -> str:
    try:
        key = Platform(platform)
    except ValueError:
        return default
    return overrides.get(key, default)


class ToolConfig(BaseModel):
    """Command and regex used to capture the version of a single tool."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(description="Default command that prints the version")
    regex: str = Field(description="Default regex with a named 'version' group")
    command_overrides: dict[Platform, str] = Field(
        default_factory=dict, description="Per-platform command overrides"
    )
    regex_overrides: dict[Platform, str] = Field(
        default_factory=dict, description="Per-platform regex overrides"
    )

    @model_validator(mode="before")
    @classmethod
    def _fold_platform_keys(cls, data: Any) -> Any:
        """Move ``command-<os>`` and ``regex-<os>`` keys into the override maps."""
        if not isinstance(data, dict):
            return data

        folded: dict[str, Any] = {}
        command_overrides = dict(data.get("command_overrides") or {})
        regex_overrides = dict(data.get("regex_overrides") or {})
        for key, value in data.items():
            field, sep, suffix = str(key).partition("-")
            if not sep:
                folded[key] = value
            elif field == "command" and suffix in _PLATFORM_KEYS:
                command_overrides[suffix] = value
            elif field == "regex" and suffix in _PLATFORM_KEYS:
                regex_overrides[suffix] = value
            else:
                logger.debug(f"Ignoring unknown tool key: {key}")

        folded["command_overrides"] = command_overrides
        folded["regex_overrides"] = regex_overrides
        return folded

    def get_effective_command(self, platform: Platform | str | None = None) -> str:
        """Get the command for a platform (detected when omitted)."""
        if platform is None:
            platform = current_platform() or ""
        return _resolve(self.command, self.command_overrides, platform)

    def get_effective_regex(self, platform: Platform | str | None = None) -> str:
        """Get the regex for a platform (detected when omitted)."""
        if platform is None:
            platform = current_platform() or ""
        return _resolve(self.regex, self.regex_overrides, platform)


class VersionMarkConfig(BaseModel):
    """Root configuration for versionmark: tool definitions keyed by name."""

    model_config = ConfigDict(frozen=True)

    tools: dict[str, ToolConfig]

    @classmethod
    def from_yaml(cls, text: str, source: str = "<string>") -> "VersionMarkConfig":
        """Parse and validate a YAML configuration document.

        Args:
            text: YAML document
            source: Name of the document, used in error messages

        Returns:
            Validated configuration with at least one tool

        Raises:
            ConfigurationError: If the document is malformed or defines no tools
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse YAML file '{source}': {single_line(str(e))}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Invalid configuration in '{source}': expected a mapping with a 'tools' key"
            )
        if not data.get("tools"):
            raise ConfigurationError("Configuration must contain at least one tool")

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in '{source}': {describe_validation_error(e)}"
            ) from e

        logger.debug(f"Loaded {len(config.tools)} tool(s) from {source}")
        return config


def load_config(path: Path) -> VersionMarkConfig:
    """Load config from a .versionmark.yaml file.

    Args:
        path: Path to the configuration file

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If the file is missing, unreadable, or invalid
    """
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read configuration file '{path}': {e}") from e
    return VersionMarkConfig.from_yaml(text, source=str(path))
