"""Exception hierarchy for Practice Insight."""

from .base import PracticeInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .corpus import (
    CorpusError,
    DocumentReadError,
    MalformedDocumentError,
)

__all__ = [
    "PracticeInsightError",
    "CorpusError",
    "DocumentReadError",
    "MalformedDocumentError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPathError",
]
