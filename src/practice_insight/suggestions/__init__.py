"""Suggestion aggregation and the reconciliation report."""

from .aggregator import (
    REASON_RECOMMENDED,
    REASON_UNDECLARED,
    SuggestionAggregator,
    infer_impact,
    order_practices,
    order_suggestions,
)
from .models import ReconciliationReport, Suggestion

__all__ = [
    "REASON_RECOMMENDED",
    "REASON_UNDECLARED",
    "ReconciliationReport",
    "Suggestion",
    "SuggestionAggregator",
    "infer_impact",
    "order_practices",
    "order_suggestions",
]
