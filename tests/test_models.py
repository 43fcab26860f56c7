"""Tests for versionmark data models."""

import json
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from versionmark.errors import AggregationInputError, OutputError
from versionmark.models import VersionInfo


def test_version_info_creation() -> None:
    info = VersionInfo(job_id="windows-latest", versions={"dotnet": "8.0.100"})
    assert info.job_id == "windows-latest"
    assert info.versions == {"dotnet": "8.0.100"}


def test_version_info_accepts_alias() -> None:
    info = VersionInfo.model_validate({"jobId": "job-1", "versions": {}})
    assert info.job_id == "job-1"


def test_serialized_keys() -> None:
    data = json.loads(VersionInfo(job_id="job-1", versions={"node": "20.0.0"}).to_json())
    assert data == {"jobId": "job-1", "versions": {"node": "20.0.0"}}


def test_version_info_is_immutable() -> None:
    info = VersionInfo(job_id="job-1")
    with pytest.raises(ValidationError):
        info.job_id = "job-2"  # type: ignore[misc]


class TestRoundTrip:
    """Capture records survive save and load unchanged."""

    @given(
        job_id=st.text(),
        versions=st.dictionaries(st.text(), st.text(), max_size=8),
    )
    @settings(max_examples=100)
    def test_json_round_trip(self, job_id: str, versions: dict[str, str]) -> None:
        info = VersionInfo(job_id=job_id, versions=versions)
        assert VersionInfo.from_json(info.to_json()) == info

    def test_file_round_trip_with_awkward_values(self, tmp_path: Path) -> None:
        info = VersionInfo(
            job_id="ubuntu / py3.12 (\"nightly\")",
            versions={
                "dotnet": "8.0.100-preview.7.23376.3+build-42",
                "multi": "line one\nline two",
                "unicode": "1.0 – édition",
                "empty": "",
            },
        )
        path = tmp_path / "versionmark-job.json"
        info.save_to_file(path)
        assert VersionInfo.load_from_file(path) == info

    def test_empty_versions_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        VersionInfo(job_id="job").save_to_file(path)
        loaded = VersionInfo.load_from_file(path)
        assert loaded.job_id == "job"
        assert loaded.versions == {}


class TestSaveToFile:
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "capture.json"
        VersionInfo(job_id="job").save_to_file(path)
        assert path.exists()

    def test_unwritable_path_raises_output_error(self, tmp_path: Path) -> None:
        # A directory where the file should be makes the write fail
        path = tmp_path / "capture.json"
        path.mkdir()
        with pytest.raises(OutputError, match="Failed to save version info"):
            VersionInfo(job_id="job").save_to_file(path)


class TestLoadFromFile:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(AggregationInputError, match="not found"):
            VersionInfo.load_from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(AggregationInputError, match="Failed to parse JSON file"):
            VersionInfo.load_from_file(path)

    def test_wrong_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"jobId": "job", "versions": {"node": 20}}))
        with pytest.raises(AggregationInputError, match="shape.json"):
            VersionInfo.load_from_file(path)

    def test_missing_job_id(self, tmp_path: Path) -> None:
        path = tmp_path / "nojob.json"
        path.write_text(json.dumps({"versions": {}}))
        with pytest.raises(AggregationInputError):
            VersionInfo.load_from_file(path)
