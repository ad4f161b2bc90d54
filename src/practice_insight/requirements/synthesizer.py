"""RequirementSynthesizer — decide which guidance documents must exist.

Independent of practices and suggestions: the decision is driven only by
dependencies, router signals, code features and the error-handling signal.

    baseline (always)      global-overview 100, code-style 90, architecture 90
    optional (dual detect) evidence fired    -> high confidence, evidence provenance
                           dependency only   -> medium confidence, dependency provenance

The result is sorted by priority descending; ties keep emission order.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Mapping, Optional, Sequence

from ..logging_config import get_logger
from ..models import Confidence, DetectedFrom
from ..signals.models import CodeFeature, Dependency, ProjectPractice, RouterSignal
from .detectors import (
    AUXILIARY_FAMILIES,
    OPTIONAL_DETECTORS,
    CategoryDetector,
    EvidenceContext,
    match_dependencies,
)
from .models import Requirement

logger = get_logger(__name__)

BASELINE_REQUIREMENTS: tuple[Requirement, ...] = (
    Requirement(
        rule_type="global-overview",
        document_name="global-rules.mdc",
        priority=100,
        reason="project-wide rules, always required",
        detected_from=DetectedFrom.CODE_ANALYSIS,
        confidence=Confidence.HIGH,
    ),
    Requirement(
        rule_type="code-style",
        document_name="code-style.mdc",
        priority=90,
        reason="code style conventions, always required",
        detected_from=DetectedFrom.CODE_ANALYSIS,
        confidence=Confidence.HIGH,
    ),
    Requirement(
        rule_type="architecture",
        document_name="architecture.mdc",
        priority=90,
        reason="project architecture conventions, always required",
        detected_from=DetectedFrom.CODE_ANALYSIS,
        confidence=Confidence.HIGH,
    ),
)


class RequirementSynthesizer:
    """Runs the baseline and every optional detector.

    Args:
        detectors: Optional-category detectors, in emission order
    """

    def __init__(self, detectors: Sequence[CategoryDetector] = OPTIONAL_DETECTORS):
        self.detectors = tuple(detectors)

    def detect(
        self,
        detector: CategoryDetector,
        dependencies: Sequence[Dependency],
        context: EvidenceContext,
    ) -> Optional[Requirement]:
        """Run one dual detector; None when neither matcher fires."""
        matched = match_dependencies(dependencies, detector.dependency_keywords)
        evidence = detector.evidence(context)

        if evidence is not None:
            reason = evidence
            if matched:
                reason += f"; dependencies: {', '.join(matched)}"
            return Requirement(
                rule_type=detector.rule_type,
                document_name=detector.document_name,
                priority=detector.priority,
                reason=reason,
                detected_from=detector.evidence_source,
                confidence=Confidence.HIGH,
                triggering_dependencies=tuple(matched),
            )
        if matched:
            return Requirement(
                rule_type=detector.rule_type,
                document_name=detector.document_name,
                priority=detector.priority,
                reason=f"{detector.label} dependencies declared: {', '.join(matched)}",
                detected_from=DetectedFrom.DEPENDENCY,
                confidence=Confidence.MEDIUM,
                triggering_dependencies=tuple(matched),
            )
        return None

    def synthesize(
        self,
        dependencies: Sequence[Dependency] = (),
        routers: Sequence[RouterSignal] = (),
        code_features: Optional[Mapping[str, CodeFeature]] = None,
        project_practice: Optional[ProjectPractice] = None,
    ) -> list[Requirement]:
        context = EvidenceContext(
            routers=tuple(routers),
            code_features=dict(code_features or {}),
            project_practice=project_practice,
        )

        requirements = list(BASELINE_REQUIREMENTS)
        for detector in self.detectors:
            requirement = self.detect(detector, dependencies, context)
            if requirement is not None:
                logger.debug(
                    f"{requirement.rule_type}: {requirement.confidence.value} "
                    f"({requirement.detected_from.value})"
                )
                requirements.append(requirement)

        for family, keywords in AUXILIARY_FAMILIES.items():
            matched = match_dependencies(dependencies, keywords)
            if matched:
                logger.debug(f"Detected {family} dependencies: {', '.join(matched)}")

        requirements.sort(key=lambda r: -r.priority)
        logger.info(f"Synthesized {len(requirements)} requirements")
        return requirements


def summarize_requirements(
    requirements: Sequence[Requirement],
) -> dict[DetectedFrom, list[Requirement]]:
    """Group requirements by provenance, in first-seen provenance order."""
    groups: dict[DetectedFrom, list[Requirement]] = defaultdict(list)
    for requirement in requirements:
        groups[requirement.detected_from].append(requirement)
    return dict(groups)
