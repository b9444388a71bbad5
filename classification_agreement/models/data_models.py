"""
Core data models for the classification agreement tools.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PatchClassification:
    """The classifier- or expert-assigned label of a single patch."""
    subsample_number: int  # one-based
    patch_index: int  # zero-based within its subsample
    classification: str

    def __post_init__(self):
        """Validate patch position after initialization."""
        if self.subsample_number < 1:
            raise ValueError("Subsample number must be at least 1")
        if self.patch_index < 0:
            raise ValueError("Patch index cannot be negative")


@dataclass(frozen=True)
class RunEntry:
    """A run listed in a run list, with the directory holding its files."""
    run_name: str
    base_directory: str

    def __post_init__(self):
        """Validate run entry after initialization."""
        if not self.run_name or not self.run_name.strip():
            raise ValueError("Run name cannot be empty")


@dataclass
class BatchSummary:
    """Outcome of processing every run of a run list."""
    subsample: int
    matrix_path: str
    processed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def total_runs(self) -> int:
        """Number of runs attempted."""
        return len(self.processed) + len(self.failed)

    @property
    def succeeded(self) -> bool:
        """True when no run failed."""
        return not self.failed
