"""
Tests for run list loading and classification file lookup.
"""

import tempfile
import pytest
from pathlib import Path
from classification_agreement.run_list import (
    RunList,
    RunListError,
    classification_file_paths,
    load_classification_lists
)
from classification_agreement.exceptions import ClassificationFileError
from classification_agreement.models.data_models import RunEntry


class TestRunList:
    """Test cases for RunList."""

    def setup_method(self):
        """Set up a temporary directory for run list files."""
        self._temp_dir = tempfile.TemporaryDirectory()
        self.temp_dir = Path(self._temp_dir.name)

    def teardown_method(self):
        self._temp_dir.cleanup()

    def _write_run_list(self, content: str) -> Path:
        path = self.temp_dir / "runfile.txt"
        path.write_text(content)
        return path

    def test_load_entries(self):
        """Test the first line is the base directory and the rest are runs."""
        path = self._write_run_list("/data/runs/\nrun_0001\nrun_0002\n")
        run_list = RunList(path)
        entries = run_list.load()

        assert [e.run_name for e in entries] == ["run_0001", "run_0002"]
        assert all(e.base_directory == "/data/runs/" for e in entries)
        assert run_list.base_directory == "/data/runs/"
        assert run_list.entries == entries

    def test_blank_lines_and_whitespace_skipped(self):
        """Test blank lines and trailing whitespace do not create runs."""
        path = self._write_run_list("/data/runs/  \r\n\nrun_0001 \r\n\n  \n")
        entries = RunList(path).load()

        assert entries == [RunEntry(run_name="run_0001", base_directory="/data/runs/")]

    def test_base_directory_only(self):
        """Test a run list with no runs loads as empty."""
        path = self._write_run_list("/data/runs/\n")
        assert RunList(path).load() == []

    def test_missing_file(self):
        """Test a missing run list raises RunListError."""
        with pytest.raises(RunListError, match="Run list file not found"):
            RunList(self.temp_dir / "missing.txt").load()

    def test_empty_file(self):
        """Test an empty run list has no base directory."""
        path = self._write_run_list("")
        with pytest.raises(RunListError, match="has no base directory line"):
            RunList(path).load()

    def test_access_before_load(self):
        """Test properties require load() first."""
        run_list = RunList(self.temp_dir / "runfile.txt")
        with pytest.raises(RunListError, match="Run list not loaded"):
            run_list.entries
        with pytest.raises(RunListError, match="Run list not loaded"):
            run_list.base_directory

    def test_run_list_error_is_classification_file_error(self):
        """Test RunListError belongs to the file error family."""
        assert issubclass(RunListError, ClassificationFileError)


class TestClassificationFiles:
    """Test cases for locating and loading a run's classification files."""

    def test_file_paths(self):
        """Test the classifier file is .acl and the expert file is .pcl."""
        entry = RunEntry(run_name="run_0001", base_directory="/data/runs/")
        predicted_path, actual_path = classification_file_paths(entry)

        assert predicted_path == Path("/data/runs/run_0001.acl")
        assert actual_path == Path("/data/runs/run_0001.pcl")

    def test_load_classification_lists(self):
        """Test both files of a run are parsed."""
        with tempfile.TemporaryDirectory() as temp_dir:
            base = temp_dir + "/"
            Path(base + "run_0001.acl").write_text("<CLASS>RBC,WBC</CLASS>\n")
            Path(base + "run_0001.pcl").write_text("<CLASS>RBC,RBC</CLASS>\n")

            predicted, actual = load_classification_lists(
                RunEntry(run_name="run_0001", base_directory=base)
            )

            assert predicted.labels(1) == ["RBC", "WBC"]
            assert actual.labels(1) == ["RBC", "RBC"]

    def test_load_missing_expert_file(self):
        """Test a missing .pcl file raises ClassificationFileError."""
        with tempfile.TemporaryDirectory() as temp_dir:
            base = temp_dir + "/"
            Path(base + "run_0001.acl").write_text("<CLASS>RBC</CLASS>\n")

            with pytest.raises(ClassificationFileError, match="run_0001.pcl"):
                load_classification_lists(RunEntry(run_name="run_0001", base_directory=base))

    def test_run_entry_requires_name(self):
        with pytest.raises(ValueError, match="Run name cannot be empty"):
            RunEntry(run_name=" ", base_directory="/data/")
