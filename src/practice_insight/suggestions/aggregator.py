"""SuggestionAggregator — turn comparisons into an ordered reconciliation report.

Classification per comparison (first match wins):

    1. included, needs confirmation   -> ambiguous_practices
    2. included, not used             -> missing_practices
    3. used, not documented           -> missing_practices

A Suggestion is emitted for comparisons that are included but neither used
nor documented. Every output list is sorted by category precedence, then by
priority, with ties kept in input order.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..comparison.models import Comparison
from ..corpus.models import Practice
from ..logging_config import get_logger
from ..models import Category, Impact, Priority
from .models import ReconciliationReport, Suggestion

logger = get_logger(__name__)

REASON_UNDECLARED = "already practiced but undeclared"
REASON_RECOMMENDED = "not yet practiced, recommended by reference corpus"

# Checked in order; first hit wins
IMPACT_KEYWORDS: tuple[tuple[Impact, tuple[str, ...]], ...] = (
    (Impact.GLOBAL, ("project", "global", "architecture")),
    (Impact.MODULE, ("module", "component", "feature")),
)


def infer_impact(content: str) -> Impact:
    text = content.lower()
    for impact, keywords in IMPACT_KEYWORDS:
        if any(k in text for k in keywords):
            return impact
    return Impact.FILE


def _order_key(category: Category, priority: Priority) -> tuple[int, int]:
    return (category.precedence, priority.rank)


def order_practices(practices: Iterable[Practice]) -> list[Practice]:
    return sorted(practices, key=lambda p: _order_key(p.category, p.priority))


def order_suggestions(suggestions: Iterable[Suggestion]) -> list[Suggestion]:
    return sorted(suggestions, key=lambda s: _order_key(s.type, s.priority))


class SuggestionAggregator:
    """Builds a ReconciliationReport from a list of comparisons."""

    def make_suggestion(self, comparison: Comparison) -> Suggestion:
        practice = comparison.practice
        return Suggestion(
            type=practice.category,
            priority=practice.priority,
            title=practice.title,
            content=practice.content,
            reason=REASON_UNDECLARED if comparison.project_uses else REASON_RECOMMENDED,
            impact=infer_impact(practice.content),
        )

    def aggregate(self, comparisons: Sequence[Comparison]) -> ReconciliationReport:
        missing: list[Practice] = []
        ambiguous: list[Practice] = []
        suggestions: list[Suggestion] = []

        for comparison in comparisons:
            practice = comparison.practice
            if comparison.should_include and comparison.needs_confirmation:
                ambiguous.append(practice)
            elif comparison.should_include and not comparison.project_uses:
                missing.append(practice)
            elif comparison.project_uses and not comparison.in_documentation:
                missing.append(practice)

            if (
                comparison.should_include
                and not comparison.project_uses
                and not comparison.in_documentation
            ):
                suggestions.append(self.make_suggestion(comparison))

        report = ReconciliationReport(
            suggestions=tuple(order_suggestions(suggestions)),
            missing_practices=tuple(order_practices(missing)),
            ambiguous_practices=tuple(order_practices(ambiguous)),
            comparisons=tuple(comparisons),
        )
        logger.info(
            f"Aggregated {len(comparisons)} comparisons: {len(report.suggestions)} suggestions, "
            f"{len(report.missing_practices)} missing, {len(report.ambiguous_practices)} ambiguous"
        )
        return report
