"""UsageComparator — join practices with project signals through threshold bands.

Pipeline per practice:
    evaluator (by category) -> UsageScore -> ThresholdBand -> UsageAssessment
    -> Comparison(should_include, in_documentation)

The comparator holds no state between calls; the sample cap and the
threshold table are fixed at construction.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from ..corpus.models import Practice
from ..logging_config import get_logger
from ..models import Disposition, Priority
from ..signals.models import ProjectSignals
from ..thresholds import ThresholdTable
from .evaluators import Evaluator, build_evaluators
from .models import Comparison, UsageAssessment

logger = get_logger(__name__)

_HEADING_LINE = re.compile(r"^\s{0,3}#{1,6}\s+(.+?)\s*#*\s*$", re.MULTILINE)


def _normalize(text: str) -> str:
    return " ".join(text.lower().split())


def _headings(text: str) -> frozenset[str]:
    return frozenset(_normalize(m.group(1)) for m in _HEADING_LINE.finditer(text))


class UsageComparator:
    """Scores practices against project signals.

    Args:
        thresholds: Per-category bands (defaults to the built-in table)
        sample_limit: Max sampled files used by the generic keyword evaluator
        existing_documentation: Previously generated documentation texts. A
            practice counts as documented when a document contains its text,
            or has a heading equal to its title (case-insensitive). Empty on
            first generation.
    """

    def __init__(
        self,
        thresholds: Optional[ThresholdTable] = None,
        sample_limit: int = 50,
        existing_documentation: Sequence[str] = (),
    ):
        self.thresholds = thresholds or ThresholdTable()
        self.sample_limit = sample_limit
        self._evaluators, self._fallback = build_evaluators(sample_limit=sample_limit)
        self._documentation = tuple(
            (_normalize(text), _headings(text)) for text in existing_documentation if text
        )

    def evaluator_for(self, practice: Practice) -> Evaluator:
        return self._evaluators.get(practice.category, self._fallback)

    def assess(self, practice: Practice, signals: ProjectSignals) -> UsageAssessment:
        """Score one practice and apply its category band."""
        score = self.evaluator_for(practice).assess(practice, signals)
        percentage = min(max(score.percentage, 0.0), 1.0)
        band = self.thresholds.band_for(practice.category)

        project_uses = band.adopts(percentage)
        needs_confirmation = band.confirms(percentage) or (score.mixed and not project_uses)
        return UsageAssessment(
            usage_percentage=percentage,
            project_uses=project_uses,
            needs_confirmation=needs_confirmation,
        )

    def is_documented(self, practice: Practice) -> bool:
        """True when a document carries the practice text or a heading with its title."""
        if not self._documentation:
            return False
        content = _normalize(practice.content)
        title = _normalize(practice.title)
        for text, headings in self._documentation:
            if content and content in text:
                return True
            if title and title in headings:
                return True
        return False

    def compare(self, practice: Practice, signals: ProjectSignals) -> Comparison:
        assessment = self.assess(practice, signals)
        should_include = (
            assessment.project_uses
            or practice.priority == Priority.HIGH
            or assessment.needs_confirmation
        )
        return Comparison(
            practice=practice,
            assessment=assessment,
            in_documentation=self.is_documented(practice),
            should_include=should_include,
        )

    def compare_all(
        self, practices: Iterable[Practice], signals: ProjectSignals
    ) -> list[Comparison]:
        """Compare every practice, preserving input order."""
        comparisons = [self.compare(p, signals) for p in practices]

        counts = {d: 0 for d in Disposition}
        for comparison in comparisons:
            counts[comparison.disposition] += 1
            logger.debug(
                f"{comparison.practice.category.value}/{comparison.practice.title}: "
                f"{comparison.usage_percentage:.2f} -> {comparison.disposition.value}"
            )
        logger.info(
            f"Compared {len(comparisons)} practices: "
            + ", ".join(f"{d.value}={n}" for d, n in counts.items())
        )
        return comparisons
