"""Requirement synthesis: which guidance documents must exist."""

from .detectors import (
    AUXILIARY_FAMILIES,
    OPTIONAL_DETECTORS,
    CategoryDetector,
    EvidenceContext,
    match_dependencies,
)
from .models import Requirement
from .synthesizer import BASELINE_REQUIREMENTS, RequirementSynthesizer, summarize_requirements

__all__ = [
    "AUXILIARY_FAMILIES",
    "BASELINE_REQUIREMENTS",
    "OPTIONAL_DETECTORS",
    "CategoryDetector",
    "EvidenceContext",
    "Requirement",
    "RequirementSynthesizer",
    "match_dependencies",
    "summarize_requirements",
]
