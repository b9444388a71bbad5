"""
Configuration for the classification agreement tools.
"""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError


@dataclass
class FileConfig:
    """Naming and decoding of the per-run classification files."""
    # Classifier output and expert ground truth
    predicted_extension: str = ".acl"
    actual_extension: str = ".pcl"

    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> 'FileConfig':
        """Create file config from environment variables."""
        return cls(
            predicted_extension=os.getenv('AGREEMENT_PREDICTED_EXT', cls.predicted_extension),
            actual_extension=os.getenv('AGREEMENT_ACTUAL_EXT', cls.actual_extension),
            encoding=os.getenv('AGREEMENT_FILE_ENCODING', cls.encoding),
        )


@dataclass
class OutputConfig:
    """Configuration for confusion matrix output."""
    matrix_filename: str = "ConfusionMatrix.txt"
    cell_separator: str = "\t"

    @classmethod
    def from_env(cls) -> 'OutputConfig':
        """Create output config from environment variables."""
        return cls(
            matrix_filename=os.getenv('AGREEMENT_MATRIX_FILENAME', cls.matrix_filename),
            cell_separator=os.getenv('AGREEMENT_CELL_SEPARATOR', cls.cell_separator),
        )


@dataclass
class RunConfig:
    """Configuration for batch runs."""
    default_subsample: int = 1

    def __post_init__(self):
        """Validate run settings."""
        if self.default_subsample < 1:
            raise ConfigurationError("Default subsample must be a positive integer")

    @classmethod
    def from_env(cls) -> 'RunConfig':
        """Create run config from environment variables."""
        raw_subsample = os.getenv('AGREEMENT_DEFAULT_SUBSAMPLE', str(cls.default_subsample))
        try:
            default_subsample = int(raw_subsample)
        except ValueError:
            raise ConfigurationError(
                f"AGREEMENT_DEFAULT_SUBSAMPLE must be an integer, got '{raw_subsample}'"
            )
        return cls(default_subsample=default_subsample)


@dataclass
class AgreementConfig:
    """Configuration for the classification agreement library."""
    files: FileConfig
    output: OutputConfig
    run: RunConfig

    @classmethod
    def from_env(cls) -> 'AgreementConfig':
        """Create agreement config from environment variables."""
        return cls(
            files=FileConfig.from_env(),
            output=OutputConfig.from_env(),
            run=RunConfig.from_env(),
        )


# Global configuration instance
config = AgreementConfig.from_env()
