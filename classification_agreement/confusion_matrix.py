"""
Confusion matrix accumulation for classifier output against ground truth.

Rows are indexed by the classifier (predicted) label and columns by the
ground-truth (actual) label, both in LABEL_VOCABULARY order.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .classification_list import ClassificationList
from .config import config
from .exceptions import MatrixWriteError
from .vocabulary import VOCABULARY_SIZE, label_index


logger = logging.getLogger(__name__)


class ConfusionMatrix:
    """Square count matrix over the fixed label vocabulary."""

    def __init__(self):
        self._counts = np.zeros((VOCABULARY_SIZE, VOCABULARY_SIZE), dtype=np.int64)

    @property
    def size(self) -> int:
        """Number of rows (and columns) in the matrix."""
        return self._counts.shape[0]

    @property
    def total(self) -> int:
        """Total number of counted patch pairs."""
        return int(self._counts.sum())

    def increment(self, predicted_index: int, actual_index: int) -> None:
        """
        Count one patch pair.

        Raises:
            IndexError: If either index lies outside the vocabulary
        """
        if not (0 <= predicted_index < VOCABULARY_SIZE and 0 <= actual_index < VOCABULARY_SIZE):
            raise IndexError(
                f"Matrix cell ({predicted_index}, {actual_index}) outside "
                f"{VOCABULARY_SIZE}x{VOCABULARY_SIZE} vocabulary"
            )
        self._counts[predicted_index, actual_index] += 1

    def add_pair(self, predicted_label: str, actual_label: str) -> None:
        """Count one patch pair given its labels."""
        self.increment(label_index(predicted_label), label_index(actual_label))

    def count(self, predicted_label: Union[str, int], actual_label: Union[str, int]) -> int:
        """Get one cell, addressed either by label or by index."""
        row = label_index(predicted_label) if isinstance(predicted_label, str) else predicted_label
        col = label_index(actual_label) if isinstance(actual_label, str) else actual_label
        return int(self._counts[row, col])

    def as_array(self) -> np.ndarray:
        """Get a copy of the counts as a numpy array."""
        return self._counts.copy()

    def to_text(self, separator: Optional[str] = None) -> str:
        """
        Serialize the matrix as one line per row.

        Every cell is followed by the separator, so each line ends with it.

        Args:
            separator: Cell separator (defaults to the configured separator)

        Returns:
            Text form of the matrix without header
        """
        sep = config.output.cell_separator if separator is None else separator
        lines = []
        for row in self._counts:
            lines.append("".join(f"{int(cell)}{sep}" for cell in row) + "\n")
        return "".join(lines)

    def append_to(self, filepath: Union[str, Path]) -> None:
        """
        Append the matrix to a text file, creating the file if needed.

        Existing content is never truncated.

        Args:
            filepath: Destination file

        Raises:
            MatrixWriteError: If the file cannot be opened or written
        """
        text = self.to_text()
        try:
            with open(filepath, 'a', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            raise MatrixWriteError(f"Failed to append confusion matrix to {filepath}: {e}") from e
        logger.debug(f"Appended {self.size}x{self.size} confusion matrix to {filepath}")

    def __repr__(self) -> str:
        return f"ConfusionMatrix(size={self.size}, total={self.total})"


def build_confusion_matrix(
    predicted: ClassificationList,
    actual: ClassificationList,
    subsample: int
) -> ConfusionMatrix:
    """
    Compare two classification lists patch by patch for one subsample.

    Patches are paired by position. When one subsample is longer than the
    other, its extra patches are not counted.

    Args:
        predicted: Classifier output
        actual: Ground truth
        subsample: One-based subsample number

    Returns:
        ConfusionMatrix indexed [predicted][actual]

    Raises:
        SubsampleIndexError: If the subsample is missing from either list
    """
    predicted_records = predicted.subsample(subsample)
    actual_records = actual.subsample(subsample)

    if len(predicted_records) != len(actual_records):
        logger.warning(
            f"Subsample {subsample} lengths differ: {len(predicted_records)} predicted, "
            f"{len(actual_records)} actual; comparing first "
            f"{min(len(predicted_records), len(actual_records))} patches"
        )

    matrix = ConfusionMatrix()
    for predicted_record, actual_record in zip(predicted_records, actual_records):
        matrix.add_pair(predicted_record.classification, actual_record.classification)

    return matrix
