"""Base formatter interface for Practice Insight output rendering."""

from abc import ABC, abstractmethod

from ..result import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult) -> None:
        """Render the result to stdout/stderr as appropriate."""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return formatted string representation of the result."""
