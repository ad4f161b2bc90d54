"""Markdown formatter — the human-readable reconciliation report.

Suggestions are grouped by category in precedence order; each one carries a
priority badge, an impact badge, a one-line reason and the practice body.
The requirement summary is grouped by provenance.
"""

from typing import Sequence

from ..models import Category, Confidence, DetectedFrom
from ..requirements.models import Requirement
from ..requirements.synthesizer import summarize_requirements
from ..result import AnalysisResult
from ..suggestions.models import ReconciliationReport
from .base import BaseFormatter

CATEGORY_TITLES = {
    Category.CODE_STYLE: "Code Style",
    Category.ARCHITECTURE: "Architecture",
    Category.ERROR_HANDLING: "Error Handling",
    Category.PERFORMANCE: "Performance",
    Category.SECURITY: "Security",
    Category.TESTING: "Testing",
    Category.COMPONENT: "Components",
    Category.ROUTING: "Routing",
    Category.STATE_MANAGEMENT: "State Management",
    Category.GENERAL: "General",
}

PROVENANCE_TITLES = {
    DetectedFrom.DEPENDENCY: "Dependency detection",
    DetectedFrom.FILE_STRUCTURE: "File structure",
    DetectedFrom.CONFIG: "Configuration files",
    DetectedFrom.CODE_ANALYSIS: "Code analysis",
}

CONFIDENCE_MARKERS = {
    Confidence.HIGH: "[high]",
    Confidence.MEDIUM: "[medium]",
    Confidence.LOW: "[low]",
}


def format_report(report: ReconciliationReport) -> list[str]:
    lines = ["## Suggestions", ""]
    groups = report.grouped()
    if not groups:
        lines += ["No suggestions.", ""]
    for category, suggestions in groups.items():
        lines += [f"### {CATEGORY_TITLES[category]}", ""]
        for s in suggestions:
            lines += [
                f"#### {s.title}",
                "",
                f"**Priority**: `{s.priority.value}`  ",
                f"**Impact**: `{s.impact.value}`  ",
                f"**Reason**: {s.reason}",
                "",
                s.content,
                "",
                "---",
                "",
            ]

    for heading, practices in (
        ("Missing practices", report.missing_practices),
        ("Needs confirmation", report.ambiguous_practices),
    ):
        if not practices:
            continue
        lines += [f"## {heading}", ""]
        for p in practices:
            lines.append(f"- **{p.title}** ({p.category.value}, {p.priority.value})")
        lines.append("")
    return lines


def format_requirements(requirements: Sequence[Requirement]) -> list[str]:
    lines = ["## Required documents", "", f"{len(requirements)} documents required", ""]
    for source, group in summarize_requirements(requirements).items():
        lines += [f"### {PROVENANCE_TITLES[source]} ({len(group)})", ""]
        for r in group:
            lines.append(
                f"- {CONFIDENCE_MARKERS[r.confidence]} **{r.document_name}** (priority {r.priority})"
            )
            lines.append(f"  - Reason: {r.reason}")
            if r.triggering_dependencies:
                lines.append(f"  - Dependencies: {', '.join(r.triggering_dependencies)}")
        lines.append("")
    return lines


class MarkdownFormatter(BaseFormatter):
    """Render the reconciliation report and requirement summary as Markdown."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        lines = ["# Practice reconciliation", ""]
        if result.root is not None:
            lines += [f"Project: `{result.root}`", ""]
        if result.report is not None:
            lines += format_report(result.report)
        if result.requirements:
            lines += format_requirements(result.requirements)
        return "\n".join(lines).rstrip() + "\n"
