"""
Exception classes for the classification agreement tools.
"""


class AgreementError(Exception):
    """Base exception for classification agreement errors."""
    pass


class ConfigurationError(AgreementError):
    """Raised when configuration is invalid."""
    pass


class ClassificationFileError(AgreementError, OSError):
    """Raised when a classification file cannot be opened or read."""
    pass


class SubsampleIndexError(AgreementError, IndexError):
    """Raised when a requested subsample does not exist in a classification list."""
    pass


class MatrixWriteError(AgreementError, OSError):
    """Raised when a confusion matrix cannot be written to its destination."""
    pass
