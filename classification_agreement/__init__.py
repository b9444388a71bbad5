"""
Classifier vs. expert agreement for patch classification lists.
"""

from .models import PatchClassification, RunEntry, BatchSummary
from .classification_list import ClassificationList
from .confusion_matrix import ConfusionMatrix, build_confusion_matrix
from .vocabulary import LABEL_VOCABULARY, VOCABULARY_SIZE, CATCH_ALL_INDEX, label_index
from .run_list import RunList, RunListError
from .batch import AgreementBatch
from .exceptions import (
    AgreementError,
    ConfigurationError,
    ClassificationFileError,
    SubsampleIndexError,
    MatrixWriteError
)

__version__ = "0.1.0"
__all__ = [
    "PatchClassification",
    "RunEntry",
    "BatchSummary",
    "ClassificationList",
    "ConfusionMatrix",
    "build_confusion_matrix",
    "LABEL_VOCABULARY",
    "VOCABULARY_SIZE",
    "CATCH_ALL_INDEX",
    "label_index",
    "RunList",
    "RunListError",
    "AgreementBatch",
    "AgreementError",
    "ConfigurationError",
    "ClassificationFileError",
    "SubsampleIndexError",
    "MatrixWriteError"
]
