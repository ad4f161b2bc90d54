"""Tests for requirement synthesis."""

import logging

from practice_insight.models import Confidence, DetectedFrom
from practice_insight.requirements import (
    BASELINE_REQUIREMENTS,
    EvidenceContext,
    RequirementSynthesizer,
    match_dependencies,
    summarize_requirements,
)
from practice_insight.signals import (
    CodeFeature,
    Dependency,
    ErrorHandlingPattern,
    ProjectPractice,
    RouterSignal,
)


def deps(*names):
    return [Dependency(name=n) for n in names]


def by_type(requirements, rule_type):
    found = [r for r in requirements if r.rule_type == rule_type]
    assert len(found) <= 1
    return found[0] if found else None


class TestBaseline:
    def test_always_present(self):
        requirements = RequirementSynthesizer().synthesize()
        assert [r.rule_type for r in requirements] == ["global-overview", "code-style", "architecture"]
        assert [r.priority for r in requirements] == [100, 90, 90]
        assert all(r.confidence == Confidence.HIGH for r in requirements)
        assert all(r.detected_from == DetectedFrom.CODE_ANALYSIS for r in requirements)

    def test_document_names(self):
        assert [r.document_name for r in BASELINE_REQUIREMENTS] == [
            "global-rules.mdc",
            "code-style.mdc",
            "architecture.mdc",
        ]


class TestDualDetection:
    def test_dependency_only_is_medium(self):
        requirements = RequirementSynthesizer().synthesize(dependencies=deps("react-router-dom"))
        routing = by_type(requirements, "frontend-routing")
        assert routing.confidence == Confidence.MEDIUM
        assert routing.detected_from == DetectedFrom.DEPENDENCY
        assert routing.triggering_dependencies == ("react-router-dom",)
        assert routing.document_name == "frontend-routing.mdc"
        assert "react-router-dom" in routing.reason

    def test_router_evidence_upgrades_to_high(self):
        requirements = RequirementSynthesizer().synthesize(
            dependencies=deps("react-router-dom"),
            routers=[RouterSignal(kind="frontend", framework="React Router", files=("src/router.tsx",))],
        )
        routing = by_type(requirements, "frontend-routing")
        assert routing.confidence == Confidence.HIGH
        assert routing.detected_from == DetectedFrom.FILE_STRUCTURE
        assert routing.triggering_dependencies == ("react-router-dom",)
        assert "React Router" in routing.reason

    def test_evidence_without_dependency(self):
        requirements = RequirementSynthesizer().synthesize(
            routers=[RouterSignal(kind="backend", framework="Django", files=("mysite/urls.py",))]
        )
        routing = by_type(requirements, "backend-routing")
        assert routing.confidence == Confidence.HIGH
        assert routing.triggering_dependencies == ()
        assert routing.document_name == "api-routing.mdc"

    def test_evidence_is_per_category(self):
        requirements = RequirementSynthesizer().synthesize(
            routers=[RouterSignal(kind="backend", framework="Express")]
        )
        assert by_type(requirements, "frontend-routing") is None

    def test_backend_dependency(self):
        requirements = RequirementSynthesizer().synthesize(dependencies=deps("express"))
        assert by_type(requirements, "backend-routing").confidence == Confidence.MEDIUM

    def test_state_feature(self):
        requirements = RequirementSynthesizer().synthesize(
            code_features={"state-management": CodeFeature("state-management", 3)}
        )
        state = by_type(requirements, "state-management")
        assert state.confidence == Confidence.HIGH
        assert state.detected_from == DetectedFrom.CODE_ANALYSIS

    def test_zero_frequency_feature_is_no_evidence(self):
        requirements = RequirementSynthesizer().synthesize(
            code_features={"testing": CodeFeature("testing", 0)}
        )
        assert by_type(requirements, "testing") is None

    def test_error_handling_from_practice_sample(self):
        practice = ProjectPractice(error_handling=ErrorHandlingPattern(type="try-catch", frequency=5))
        requirements = RequirementSynthesizer().synthesize(project_practice=practice)
        errors = by_type(requirements, "error-handling")
        assert errors.confidence == Confidence.HIGH
        assert errors.detected_from == DetectedFrom.CODE_ANALYSIS

    def test_error_handling_absent_without_signal(self):
        practice = ProjectPractice(error_handling=ErrorHandlingPattern(type="none", frequency=0))
        requirements = RequirementSynthesizer().synthesize(project_practice=practice)
        assert by_type(requirements, "error-handling") is None

    def test_error_monitoring_dependency(self):
        requirements = RequirementSynthesizer().synthesize(dependencies=deps("@sentry/react"))
        errors = by_type(requirements, "error-handling")
        assert errors.confidence == Confidence.MEDIUM
        assert errors.triggering_dependencies == ("@sentry/react",)

    def test_auxiliary_families_only_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="practice_insight")
        requirements = RequirementSynthesizer().synthesize(
            dependencies=deps("tailwindcss", "prisma", "webpack")
        )
        assert len(requirements) == 3
        assert "styling dependencies: tailwindcss" in caplog.text
        assert "database dependencies: prisma" in caplog.text


class TestOrdering:
    def test_sorted_by_priority(self):
        requirements = RequirementSynthesizer().synthesize(
            dependencies=deps("react", "jest", "axios", "redux")
        )
        priorities = [r.priority for r in requirements]
        assert priorities == sorted(priorities, reverse=True)
        assert [r.rule_type for r in requirements[:2]] == ["global-overview", "custom-tools"]

    def test_ties_keep_emission_order(self):
        requirements = RequirementSynthesizer().synthesize(
            dependencies=deps("zustand", "express", "next")
        )
        tied = [r.rule_type for r in requirements if r.priority == 85]
        assert tied == ["frontend-routing", "backend-routing", "state-management"]

    def test_deterministic(self):
        kwargs = dict(
            dependencies=deps("react", "vitest"),
            code_features={"custom-hooks": CodeFeature("custom-hooks", 2)},
        )
        synthesizer = RequirementSynthesizer()
        assert synthesizer.synthesize(**kwargs) == synthesizer.synthesize(**kwargs)


class TestHelpers:
    def test_match_dependencies_case_insensitive_without_repeats(self):
        assert match_dependencies(deps("React", "React", "react-dom"), ["react"]) == ["React", "react-dom"]

    def test_match_dependencies_by_name_part(self):
        assert match_dependencies(deps("@reduxjs/toolkit"), ["redux"]) == ["@reduxjs/toolkit"]
        assert match_dependencies(deps("@testing-library/react"), ["testing-library"]) == [
            "@testing-library/react"
        ]
        assert match_dependencies(deps("preact"), ["react"]) == []

    def test_short_keywords_do_not_match_inside_names(self):
        requirements = RequirementSynthesizer().synthesize(
            dependencies=deps("husky", "eslint-plugin-import", "@babel/plugin-transform-runtime", "langchain")
        )
        assert [r.rule_type for r in requirements] == [r.rule_type for r in BASELINE_REQUIREMENTS]

    def test_evidence_context_router_lookup(self):
        context = EvidenceContext(routers=(RouterSignal(kind="frontend"),))
        assert context.router("frontend") is not None
        assert context.router("backend") is None

    def test_summarize_by_provenance(self):
        requirements = RequirementSynthesizer().synthesize(dependencies=deps("jest"))
        summary = summarize_requirements(requirements)
        assert list(summary) == [DetectedFrom.CODE_ANALYSIS, DetectedFrom.DEPENDENCY]
        assert [r.rule_type for r in summary[DetectedFrom.DEPENDENCY]] == ["testing"]

    def test_to_dict(self):
        requirements = RequirementSynthesizer().synthesize(
            routers=[RouterSignal(kind="frontend", framework="Next.js")]
        )
        requirement = by_type(requirements, "frontend-routing")
        data = requirement.to_dict()
        assert data["detected_from"] == "file-structure"
        assert data["confidence"] == "high"
        assert data["triggering_dependencies"] == []
