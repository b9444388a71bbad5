"""
Fixed label vocabulary shared by both axes of a confusion matrix.

Every label string maps to a row/column index. Known labels map to their
position in LABEL_VOCABULARY; anything else, including the "NONE" sentinel
used for patches without a label, maps to the final catch-all slot.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# Label assigned by the parser to a patch with an empty classification
NO_CLASSIFICATION = "NONE"

LABEL_VOCABULARY: Tuple[str, ...] = (
    "RBC",
    "DRBC",
    "RBCC",
    "WBC",
    "WBCC",
    "BACT",
    "SQEP",
    "NSE",
    "TREP",
    "REEP",
    "CAOX",
    "URIC",
    "TPO4",
    "CAPH",
    "CYST",
    "LEUC",
    "AMOR",
    "CELL",
    "GRAN",
    "MUCS",
    "SPRM",
    "BYST",
    "HYST",
    "TRCH",
    "BUBB",
    NO_CLASSIFICATION,
)

VOCABULARY_SIZE = len(LABEL_VOCABULARY)
CATCH_ALL_INDEX = VOCABULARY_SIZE - 1

LABEL_INDEX: Mapping[str, int] = MappingProxyType(
    {label: index for index, label in enumerate(LABEL_VOCABULARY)}
)


def label_index(label: str) -> int:
    """
    Map a classification label to its confusion matrix index.

    Matching is exact and case-sensitive. Unknown labels fall through to
    CATCH_ALL_INDEX.

    Args:
        label: Classification label as read from a classification file

    Returns:
        Index in the range [0, VOCABULARY_SIZE - 1]
    """
    return LABEL_INDEX.get(label, CATCH_ALL_INDEX)
