"""
Parser for classification list files (.acl and .pcl).

A classification list file holds one <CLASS> block per subsample. Each block
body is a comma-separated sequence of patch labels and ends at the next '<'
character, for example:

    <CLASS>RBC,WBC,,SQEP</CLASS>

Lines outside a block that do not start with the <CLASS> tag are ignored.
An empty label between two delimiters is recorded as "NONE".
"""

import io
import logging
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union

from .config import config
from .exceptions import ClassificationFileError, SubsampleIndexError
from .models.data_models import PatchClassification
from .vocabulary import NO_CLASSIFICATION


logger = logging.getLogger(__name__)

CLASS_TAG = "<CLASS>"
TAG_START = "<"
LABEL_SEPARATOR = ","


class _ScanState(Enum):
    SCANNING_OUTSIDE_TAG = "scanning_outside_tag"
    IN_SUBSAMPLE_BODY = "in_subsample_body"


class _ClassificationTokenizer:
    """
    Single-pass state machine over a character stream.

    The '<' that ends a subsample body is pushed back so that it is read
    again as the first character of the next tag.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pushback: Optional[str] = None
        self._state = _ScanState.SCANNING_OUTSIDE_TAG
        self.subsamples: List[List[PatchClassification]] = []

    def _read(self) -> str:
        if self._pushback is not None:
            char, self._pushback = self._pushback, None
            return char
        return self._stream.read(1)

    def _unread(self, char: str) -> None:
        self._pushback = char

    def run(self) -> List[List[PatchClassification]]:
        while True:
            if self._state is _ScanState.SCANNING_OUTSIDE_TAG:
                if not self._scan_for_tag():
                    break
                self._state = _ScanState.IN_SUBSAMPLE_BODY
            else:
                if not self._read_subsample_body():
                    break
                self._state = _ScanState.SCANNING_OUTSIDE_TAG
        return self.subsamples

    def _scan_for_tag(self) -> bool:
        """
        Advance to just past the next <CLASS> tag.

        Returns:
            False once the stream is exhausted without finding a tag
        """
        while True:
            char = self._read()
            while char and char.isspace():
                char = self._read()
            if not char:
                return False

            matched = 0
            while char == CLASS_TAG[matched]:
                matched += 1
                if matched == len(CLASS_TAG):
                    return True
                char = self._read()
            if not char:
                return False

            # Not a <CLASS> line, discard through the end of the line
            while char and char != "\n":
                char = self._read()
            if not char:
                return False

    def _read_subsample_body(self) -> bool:
        """
        Read one subsample body into a new entry of self.subsamples.

        Returns:
            True if the body was terminated by '<', False at end of stream
        """
        subsample_number = len(self.subsamples) + 1
        records: List[PatchClassification] = []
        self.subsamples.append(records)

        token: List[str] = []
        consumed_any = False

        while True:
            char = self._read()
            if not char:
                if token:
                    logger.debug(
                        f"Dropping unterminated label '{''.join(token)}' "
                        f"at end of subsample {subsample_number}"
                    )
                return False
            if char.isspace():
                continue

            if char == LABEL_SEPARATOR or char == TAG_START:
                # A body consisting of nothing but its terminator holds no patches
                if consumed_any or char == LABEL_SEPARATOR:
                    label = "".join(token) if token else NO_CLASSIFICATION
                    records.append(PatchClassification(
                        subsample_number=subsample_number,
                        patch_index=len(records),
                        classification=label
                    ))
                    token = []
                if char == TAG_START:
                    self._unread(char)
                    return True
            else:
                token.append(char)
            consumed_any = True


class ClassificationList:
    """
    Per-subsample patch classifications read from one classification file.

    Subsamples are numbered from 1 in the order their <CLASS> blocks appear.
    Within a subsample, patches are stored in file order and their
    patch_index values run 0..n-1 without gaps.
    """

    def __init__(self, subsamples: Optional[List[List[PatchClassification]]] = None):
        """
        Initialize the list from already parsed subsamples.

        Args:
            subsamples: Patch classifications grouped by subsample
        """
        self._subsamples = tuple(tuple(records) for records in (subsamples or []))

    @classmethod
    def from_stream(cls, stream: TextIO) -> 'ClassificationList':
        """
        Parse a classification list from a readable text stream.

        Malformed content never raises; unterminated trailing labels are dropped.

        Args:
            stream: Readable text stream positioned at the start of the file

        Returns:
            Parsed ClassificationList
        """
        subsamples = _ClassificationTokenizer(stream).run()
        logger.debug(
            f"Parsed {len(subsamples)} subsamples with "
            f"{sum(len(s) for s in subsamples)} patch classifications"
        )
        return cls(subsamples)

    @classmethod
    def from_text(cls, text: str) -> 'ClassificationList':
        """Parse a classification list from a string."""
        return cls.from_stream(io.StringIO(text))

    @classmethod
    def from_file(cls, filepath: Union[str, Path], encoding: Optional[str] = None) -> 'ClassificationList':
        """
        Parse a classification list from an .acl or .pcl file.

        Args:
            filepath: Path to the classification file
            encoding: Text encoding (defaults to the configured file encoding)

        Returns:
            Parsed ClassificationList

        Raises:
            ClassificationFileError: If the file cannot be opened or read
        """
        path = Path(filepath)
        if not path.is_file():
            raise ClassificationFileError(f"Classification file not found: {path}")

        try:
            with open(path, 'r', encoding=encoding or config.files.encoding) as f:
                return cls.from_stream(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ClassificationFileError(f"Failed to read classification file {path}: {e}") from e

    @property
    def subsample_count(self) -> int:
        """Number of subsamples in the list."""
        return len(self._subsamples)

    def subsample(self, number: int) -> List[PatchClassification]:
        """
        Get the patch classifications of one subsample.

        Args:
            number: One-based subsample number

        Returns:
            Patch classifications in patch order

        Raises:
            SubsampleIndexError: If the subsample does not exist
        """
        if not 1 <= number <= len(self._subsamples):
            raise SubsampleIndexError(
                f"Subsample {number} out of range: list has {len(self._subsamples)} subsamples"
            )
        return list(self._subsamples[number - 1])

    def labels(self, number: int) -> List[str]:
        """Get the classification labels of one subsample in patch order."""
        return [record.classification for record in self.subsample(number)]

    @property
    def classifications(self) -> List[List[PatchClassification]]:
        """All subsamples, each as a list of patch classifications."""
        return [list(records) for records in self._subsamples]

    def __len__(self) -> int:
        return len(self._subsamples)

    def __iter__(self) -> Iterator[List[PatchClassification]]:
        return iter(self.classifications)
