"""JSON formatter for Practice Insight."""

import json

from ..result import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the result as JSON. Enum values are emitted in kebab-case."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=2)
