"""
Run list loading and classification file lookup.

A run list is a text file whose first line is the directory holding the run
files and whose remaining lines each name one run:

    /data/runs/
    run_0001
    run_0002

The directory is used as a plain prefix, so it normally ends with a path
separator. Each run has a classifier file (<dir><run>.acl) and an expert
file (<dir><run>.pcl).
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from .classification_list import ClassificationList
from .config import config
from .exceptions import ClassificationFileError
from .models.data_models import RunEntry


logger = logging.getLogger(__name__)


class RunListError(ClassificationFileError):
    """Raised when a run list cannot be read or is malformed."""
    pass


class RunList:
    """Loads run entries from a run list file."""

    def __init__(self, filepath: Union[str, Path]):
        """
        Initialize the run list with its file path.

        Args:
            filepath: Path to the run list file
        """
        self.filepath = filepath
        self._entries: List[RunEntry] = []
        self._base_directory = ""
        self._loaded = False

    def load(self) -> List[RunEntry]:
        """
        Read the run list file.

        Returns:
            Run entries in file order

        Raises:
            RunListError: If the file is missing, unreadable or has no base directory line
        """
        path = Path(self.filepath)
        if not path.is_file():
            raise RunListError(f"Run list file not found: {self.filepath}")

        try:
            with open(path, 'r', encoding=config.files.encoding) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise RunListError(f"Failed to read run list {self.filepath}: {e}") from e

        if not lines or not lines[0].strip():
            raise RunListError(f"Run list {self.filepath} has no base directory line")

        base_directory = lines[0].strip()
        entries = []
        for line in lines[1:]:
            run_name = line.strip()
            if not run_name:
                continue
            entries.append(RunEntry(run_name=run_name, base_directory=base_directory))

        logger.info(f"Loaded {len(entries)} runs from {self.filepath}")

        self._base_directory = base_directory
        self._entries = entries
        self._loaded = True
        return entries

    @property
    def base_directory(self) -> str:
        """Directory prefix for every run in the list."""
        if not self._loaded:
            raise RunListError("Run list not loaded. Call load() first.")
        return self._base_directory

    @property
    def entries(self) -> List[RunEntry]:
        """Loaded run entries."""
        if not self._loaded:
            raise RunListError("Run list not loaded. Call load() first.")
        return self._entries


def classification_file_paths(entry: RunEntry) -> Tuple[Path, Path]:
    """
    Get the classifier and expert classification file paths of a run.

    Returns:
        (predicted path, actual path)
    """
    prefix = entry.base_directory + entry.run_name
    return (
        Path(prefix + config.files.predicted_extension),
        Path(prefix + config.files.actual_extension),
    )


def load_classification_lists(entry: RunEntry) -> Tuple[ClassificationList, ClassificationList]:
    """
    Parse both classification files of a run.

    Returns:
        (classifier output, ground truth)

    Raises:
        ClassificationFileError: If either file cannot be read
    """
    predicted_path, actual_path = classification_file_paths(entry)
    logger.debug(f"Reading {predicted_path} and {actual_path}")
    return (
        ClassificationList.from_file(predicted_path),
        ClassificationList.from_file(actual_path),
    )
