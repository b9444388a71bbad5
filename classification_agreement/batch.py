"""
Batch confusion matrix generation over every run of a run list.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .confusion_matrix import ConfusionMatrix, build_confusion_matrix
from .config import config
from .exceptions import AgreementError, ConfigurationError, MatrixWriteError
from .models.data_models import BatchSummary, RunEntry
from .run_list import RunList, load_classification_lists


logger = logging.getLogger(__name__)


class AgreementBatch:
    """
    Writes one confusion matrix per run to a shared output file.

    Each run's matrix compares the classifier file against the expert file
    for the selected subsample and is appended to
    <destination>/ConfusionMatrix.txt in run list order.
    """

    def __init__(self, destination: Union[str, Path], subsample: Optional[int] = None):
        """
        Initialize the batch with its output directory and subsample.

        Args:
            destination: Directory receiving the confusion matrix file
            subsample: One-based subsample number (defaults to the configured subsample)

        Raises:
            ConfigurationError: If subsample is not a positive integer
        """
        if subsample is None:
            subsample = config.run.default_subsample
        if subsample < 1:
            raise ConfigurationError("Subsample must be a positive integer")

        self.destination = Path(destination)
        self.subsample = subsample

    @property
    def matrix_path(self) -> Path:
        """Path of the confusion matrix output file."""
        return self.destination / config.output.matrix_filename

    def process_run(self, entry: RunEntry) -> ConfusionMatrix:
        """
        Build and append the confusion matrix of one run.

        Raises:
            AgreementError: If the run files cannot be read, the subsample is
                missing or the matrix cannot be written
        """
        predicted, actual = load_classification_lists(entry)
        matrix = build_confusion_matrix(predicted, actual, self.subsample)
        matrix.append_to(self.matrix_path)
        logger.info(f"Run {entry.run_name}: {matrix.total} patches compared")
        return matrix

    def run(self, runlist_path: Union[str, Path]) -> BatchSummary:
        """
        Process every run of a run list.

        A run that fails is logged and skipped; the remaining runs are still
        processed.

        Args:
            runlist_path: Path to the run list file

        Returns:
            BatchSummary listing processed and failed runs

        Raises:
            RunListError: If the run list itself cannot be read
            MatrixWriteError: If the destination directory cannot be created
        """
        entries = RunList(runlist_path).load()

        try:
            self.destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MatrixWriteError(f"Failed to create output directory {self.destination}: {e}") from e

        summary = BatchSummary(subsample=self.subsample, matrix_path=str(self.matrix_path))
        for entry in entries:
            logger.info(f"Processing -> {entry.run_name}")
            try:
                self.process_run(entry)
                summary.processed.append(entry.run_name)
            except AgreementError as e:
                logger.error(f"Run {entry.run_name} failed: {e}")
                summary.failed.append(entry.run_name)

        logger.info(
            f"Finished {summary.total_runs} runs: {len(summary.processed)} processed, "
            f"{len(summary.failed)} failed"
        )
        return summary
