"""Pydantic data models for versionmark artifacts.

Example:
    >>> from versionmark.models import VersionInfo
    >>> info = VersionInfo(job_id="linux-x64", versions={"dotnet": "8.0.100"})
    >>> print(info.to_json())
    {
      "jobId": "linux-x64",
      "versions": {
        "dotnet": "8.0.100"
      }
    }
"""

from .version_info import VersionInfo

__all__ = ["VersionInfo"]
