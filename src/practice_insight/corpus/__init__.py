"""Reference corpus: loading documents and extracting practices."""

from .extractor import PracticeExtractor, deduplicate
from .loader import load_corpus, read_document
from .models import CorpusDocument, Practice, PracticePoint, Section

__all__ = [
    "CorpusDocument",
    "Practice",
    "PracticePoint",
    "Section",
    "PracticeExtractor",
    "deduplicate",
    "load_corpus",
    "read_document",
]
