"""
Data models for the classification agreement tools.
"""

from .data_models import (
    PatchClassification,
    RunEntry,
    BatchSummary
)

__all__ = [
    "PatchClassification",
    "RunEntry",
    "BatchSummary"
]
