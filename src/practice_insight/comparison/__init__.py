"""Usage comparison: practices scored against project signals."""

from .comparator import UsageComparator
from .evaluators import (
    ArchitectureEvaluator,
    CodeStyleEvaluator,
    ComponentEvaluator,
    ErrorHandlingEvaluator,
    Evaluator,
    GenericKeywordEvaluator,
    build_evaluators,
)
from .models import Comparison, UsageAssessment, UsageScore

__all__ = [
    "UsageComparator",
    "Comparison",
    "UsageAssessment",
    "UsageScore",
    "Evaluator",
    "ArchitectureEvaluator",
    "CodeStyleEvaluator",
    "ComponentEvaluator",
    "ErrorHandlingEvaluator",
    "GenericKeywordEvaluator",
    "build_evaluators",
]
