"""Data models for practice-vs-project comparison."""

from __future__ import annotations

from dataclasses import dataclass

from ..corpus.models import Practice
from ..models import Disposition


@dataclass(frozen=True)
class UsageScore:
    """Raw evaluator output before banding.

    ``mixed`` is set by evaluators that saw a mixed project style for a cue the
    practice mentions; it makes the practice a confirmation candidate.
    """

    percentage: float = 0.0
    mixed: bool = False


@dataclass(frozen=True)
class UsageAssessment:
    usage_percentage: float
    project_uses: bool
    needs_confirmation: bool


@dataclass(frozen=True)
class Comparison:
    practice: Practice
    assessment: UsageAssessment
    in_documentation: bool
    should_include: bool

    @property
    def project_uses(self) -> bool:
        return self.assessment.project_uses

    @property
    def needs_confirmation(self) -> bool:
        return self.assessment.needs_confirmation

    @property
    def usage_percentage(self) -> float:
        return self.assessment.usage_percentage

    @property
    def disposition(self) -> Disposition:
        if self.project_uses:
            return Disposition.ADOPTED if self.in_documentation else Disposition.MISSING
        if self.needs_confirmation:
            return Disposition.AMBIGUOUS
        if self.should_include:
            return Disposition.MISSING
        return Disposition.IGNORED

    def to_dict(self) -> dict:
        return {
            "practice": self.practice.to_dict(),
            "usage_percentage": round(self.usage_percentage, 4),
            "project_uses": self.project_uses,
            "needs_confirmation": self.needs_confirmation,
            "in_documentation": self.in_documentation,
            "should_include": self.should_include,
            "disposition": self.disposition.value,
        }
