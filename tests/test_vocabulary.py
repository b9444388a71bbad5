"""
Tests for the label vocabulary.
"""

import pytest
from classification_agreement.vocabulary import (
    CATCH_ALL_INDEX,
    LABEL_INDEX,
    LABEL_VOCABULARY,
    NO_CLASSIFICATION,
    VOCABULARY_SIZE,
    label_index
)


class TestLabelVocabulary:
    """Test cases for the fixed vocabulary and its mapping."""

    def test_vocabulary_shape(self):
        """Test 25 known labels followed by the catch-all."""
        assert VOCABULARY_SIZE == 26
        assert CATCH_ALL_INDEX == 25
        assert LABEL_VOCABULARY[CATCH_ALL_INDEX] == NO_CLASSIFICATION
        assert len(set(LABEL_VOCABULARY)) == VOCABULARY_SIZE

    @pytest.mark.parametrize("label,index", [
        ("RBC", 0),
        ("WBC", 3),
        ("SQEP", 6),
        ("CAOX", 10),
        ("AMOR", 16),
        ("BUBB", 24),
    ])
    def test_known_labels(self, label, index):
        """Test known labels map to their fixed position."""
        assert label_index(label) == index

    @pytest.mark.parametrize("label", ["NONE", "", "rbc", " RBC", "RBC ", "UNKNOWN"])
    def test_unmatched_labels_use_catch_all(self, label):
        """Test matching is exact and falls through to the catch-all."""
        assert label_index(label) == CATCH_ALL_INDEX

    def test_mapping_is_total_and_deterministic(self):
        """Test every label maps to a valid index, the same one each time."""
        for label in list(LABEL_VOCABULARY) + ["X", "NONE", "WBCC2"]:
            first = label_index(label)
            assert 0 <= first < VOCABULARY_SIZE
            assert label_index(label) == first

    def test_mapping_is_read_only(self):
        """Test the shared mapping cannot be modified."""
        with pytest.raises(TypeError):
            LABEL_INDEX["NEW"] = 0
