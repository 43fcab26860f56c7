"""VersionMark: capture tool versions in CI jobs and publish them as markdown."""

__version__ = "0.1.0"
