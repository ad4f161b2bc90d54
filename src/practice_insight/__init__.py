"""
Practice Insight - reconcile a codebase with reference guidance.

Extracts categorized practices from a reference corpus, scores them against
heuristic evidence sampled from a project, and decides which guidance
documents the project needs.
"""

__version__ = "0.1.0"

from .api import analyze, extract_practices, reconcile, synthesize_requirements
from .corpus import CorpusDocument, Practice
from .models import Category, Priority
from .requirements import Requirement
from .result import AnalysisResult
from .suggestions import ReconciliationReport, Suggestion

__all__ = [
    "analyze",  # Main entry point
    "extract_practices",
    "reconcile",
    "synthesize_requirements",
    "AnalysisResult",
    "Category",
    "CorpusDocument",
    "Practice",
    "Priority",
    "ReconciliationReport",
    "Requirement",
    "Suggestion",
]
