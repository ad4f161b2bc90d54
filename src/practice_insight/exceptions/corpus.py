"""Corpus-related exceptions: unreadable or malformed reference documents.

These never escape the extractor. They are raised at the point of failure so
the message carries the document identity, then caught per document and
logged.
"""

from pathlib import Path
from typing import Union

from .base import PracticeInsightError


class CorpusError(PracticeInsightError):
    """Base class for reference-corpus errors."""
    pass


class DocumentReadError(CorpusError):
    """Raised when a corpus document cannot be read from storage."""

    def __init__(self, path: Union[Path, str], reason: str):
        super().__init__(
            f"Cannot read corpus document: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class MalformedDocumentError(CorpusError):
    """Raised when a corpus document is not usable section-delimited text."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Malformed corpus document: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason
