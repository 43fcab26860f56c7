"""Shared test fixtures for versionmark tests."""

import shlex
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml
from typer.testing import CliRunner

VERSION_REGEX = r"(?<version>\d+\.\d+\.\d+)"


def python_command(code: str) -> str:
    """Build a command line that runs a Python snippet with this interpreter."""
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"


def echo_command(text: str) -> str:
    """Build a command line that prints text to stdout."""
    return python_command(f"print({text!r})")


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change cwd to an empty temporary directory for the duration of the test."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(workdir: Path) -> Callable[[dict[str, Any]], Path]:
    """Return a helper that writes .versionmark.yaml into the working directory."""

    def _write(tools: dict[str, Any]) -> Path:
        path = workdir / ".versionmark.yaml"
        path.write_text(yaml.safe_dump({"tools": tools}, sort_keys=False))
        return path

    return _write


@pytest.fixture
def sample_tools() -> dict[str, Any]:
    """Two tools whose commands print fixed versions."""
    return {
        "alpha": {
            "command": echo_command("alpha version 1.2.3"),
            "regex": r"alpha version " + VERSION_REGEX,
        },
        "beta": {
            "command": python_command("import sys; sys.stderr.write('beta 4.5.6-rc.1+build.7')"),
            "regex": r"beta (?P<version>\S+)",
        },
    }


@pytest.fixture
def py_cmd() -> Callable[[str], str]:
    """Return python_command for building commands inside tests."""
    return python_command


@pytest.fixture
def echo_cmd() -> Callable[[str], str]:
    """Return echo_command for building commands inside tests."""
    return echo_command
