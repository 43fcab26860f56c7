"""CLI command implementations for versionmark.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .capture import capture
from .publish import publish

__all__ = [
    "capture",
    "publish",
]
