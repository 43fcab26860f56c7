"""Capture record model.

One record is produced per CI job and persisted as JSON; many records are
later loaded back to build a report.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import AggregationInputError, OutputError, describe_validation_error


class VersionInfo(BaseModel):
    """Tool versions captured by one job.

    Attributes:
        job_id: Opaque identifier of the CI job (serialized as ``jobId``)
        versions: Captured version string keyed by tool name
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    job_id: str = Field(alias="jobId", description="Job that produced the capture")
    versions: dict[str, str] = Field(
        default_factory=dict, description="Version string keyed by tool name"
    )

    def to_json(self) -> str:
        """Serialize to the persisted JSON representation."""
        return self.model_dump_json(by_alias=True, indent=2)

    @classmethod
    def from_json(cls, text: str | bytes) -> "VersionInfo":
        """Parse the persisted JSON representation.

        Raises:
            pydantic.ValidationError: If the text is not a valid capture record
        """
        return cls.model_validate_json(text)

    def save_to_file(self, path: Path) -> None:
        """Write the record to a UTF-8 JSON file, creating parent directories.

        Raises:
            OutputError: If the file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.to_json(), encoding="utf-8")
        except OSError as e:
            raise OutputError(f"Failed to save version info to file '{path}': {e}") from e

    @classmethod
    def load_from_file(cls, path: Path) -> "VersionInfo":
        """Read a record previously written by save_to_file.

        Raises:
            AggregationInputError: If the file is missing, unreadable, or malformed
        """
        if not path.is_file():
            raise AggregationInputError(f"Version info file not found: {path}")
        try:
            data = path.read_bytes()
        except OSError as e:
            raise AggregationInputError(f"Failed to read version info file '{path}': {e}") from e
        try:
            return cls.from_json(data)
        except ValidationError as e:
            raise AggregationInputError(
                f"Failed to parse JSON file '{path}': {describe_validation_error(e)}"
            ) from e
