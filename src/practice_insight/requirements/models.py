"""Data models for requirement synthesis."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import Confidence, DetectedFrom


@dataclass(frozen=True)
class Requirement:
    """Decision that a guidance document of ``rule_type`` should be generated.

    Attributes:
        rule_type: Document category (``frontend-routing``, ``testing``, ...)
        document_name: File name of the document to render
        priority: Higher renders first
        reason: Which matchers fired, in words
        detected_from: Provenance of the strongest evidence
        confidence: ``high`` when observed in the codebase, ``medium`` when
            only declared as a dependency
        triggering_dependencies: Dependency names that matched
    """

    rule_type: str
    document_name: str
    priority: int
    reason: str
    detected_from: DetectedFrom
    confidence: Confidence
    triggering_dependencies: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "rule_type": self.rule_type,
            "document_name": self.document_name,
            "priority": self.priority,
            "reason": self.reason,
            "detected_from": self.detected_from.value,
            "confidence": self.confidence.value,
            "triggering_dependencies": list(self.triggering_dependencies),
        }
