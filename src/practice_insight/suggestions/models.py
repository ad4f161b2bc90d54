"""Data models for the reconciliation report."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..comparison.models import Comparison
from ..corpus.models import Practice
from ..models import CATEGORY_ORDER, Category, Impact, Priority


@dataclass(frozen=True)
class Suggestion:
    """A practice recommended for the project's guidance documents.

    ``type`` is the practice category.
    """

    type: Category
    priority: Priority
    title: str
    content: str
    reason: str
    impact: Impact

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "priority": self.priority.value,
            "title": self.title,
            "content": self.content,
            "reason": self.reason,
            "impact": self.impact.value,
        }


@dataclass(frozen=True)
class ReconciliationReport:
    """Aggregated output of one reconciliation run.

    All lists are ordered by category precedence, then priority.
    ``comparisons`` keeps the comparator's input order.
    """

    suggestions: tuple[Suggestion, ...] = ()
    missing_practices: tuple[Practice, ...] = ()
    ambiguous_practices: tuple[Practice, ...] = ()
    comparisons: tuple[Comparison, ...] = field(default=(), compare=False)

    @property
    def is_empty(self) -> bool:
        return not (self.suggestions or self.missing_practices or self.ambiguous_practices)

    def grouped(self) -> dict[Category, list[Suggestion]]:
        """Suggestions grouped by category, in precedence order, empty groups omitted."""
        groups: dict[Category, list[Suggestion]] = {c: [] for c in CATEGORY_ORDER}
        for suggestion in self.suggestions:
            groups[suggestion.type].append(suggestion)
        return {c: items for c, items in groups.items() if items}

    def to_dict(self) -> dict:
        return {
            "suggestions": [s.to_dict() for s in self.suggestions],
            "missing_practices": [p.to_dict() for p in self.missing_practices],
            "ambiguous_practices": [p.to_dict() for p in self.ambiguous_practices],
        }
