"""Tests for the markdown, JSON and rich formatters."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from practice_insight.api import reconcile
from practice_insight.formatters import (
    JsonFormatter,
    MarkdownFormatter,
    RichFormatter,
    get_formatter,
)
from practice_insight.models import Category, Priority
from practice_insight.requirements import RequirementSynthesizer
from practice_insight.result import AnalysisResult
from practice_insight.signals import Dependency, ErrorHandlingPattern, ProjectPractice, ProjectSignals
from practice_insight.suggestions import ReconciliationReport


@pytest.fixture
def result(practice_factory):
    practices = [
        practice_factory(
            "use try-catch blocks",
            category=Category.ERROR_HANDLING,
            title="Use try-catch",
            priority=Priority.HIGH,
        ),
        practice_factory("Prefer React hooks", category=Category.GENERAL, priority=Priority.LOW),
    ]
    signals = ProjectSignals(
        practice=ProjectPractice(error_handling=ErrorHandlingPattern(type="none", frequency=0))
    )
    requirements = RequirementSynthesizer().synthesize(dependencies=[Dependency("react-router-dom")])
    return AnalysisResult(
        root=Path("app"),
        report=reconcile(practices, signals),
        requirements=tuple(requirements),
        practice_count=len(practices),
        file_count=12,
    )


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("markdown"), MarkdownFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("rich"), RichFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("csv")


class TestMarkdownFormatter:
    def test_suggestion_block(self, result):
        text = MarkdownFormatter().format(result)
        assert text.startswith("# Practice reconciliation")
        assert "### Error Handling" in text
        assert "#### Use try-catch" in text
        assert "**Priority**: `high`" in text
        assert "**Impact**: `file`" in text
        assert "**Reason**: not yet practiced, recommended by reference corpus" in text

    def test_missing_section(self, result):
        text = MarkdownFormatter().format(result)
        assert "## Missing practices" in text
        assert "- **Use try-catch** (error-handling, high)" in text
        assert "Needs confirmation" not in text

    def test_requirements_grouped_by_provenance(self, result):
        text = MarkdownFormatter().format(result)
        assert "## Required documents" in text
        assert "### Code analysis (3)" in text
        assert "### Dependency detection (2)" in text
        assert "- [medium] **frontend-routing.mdc** (priority 85)" in text
        assert "  - Dependencies: react-router-dom" in text

    def test_no_suggestions(self):
        text = MarkdownFormatter().format(AnalysisResult(report=ReconciliationReport()))
        assert "No suggestions." in text

    def test_requirements_only(self, result):
        text = MarkdownFormatter().format(
            AnalysisResult(root=Path("app"), requirements=result.requirements)
        )
        assert "## Suggestions" not in text
        assert "global-rules.mdc" in text

    def test_render_prints(self, result, capsys):
        MarkdownFormatter().render(result)
        assert "# Practice reconciliation" in capsys.readouterr().out


class TestJsonFormatter:
    def test_structure(self, result):
        data = json.loads(JsonFormatter().format(result))
        assert data["root"] == "app"
        assert data["file_count"] == 12
        assert data["practice_count"] == 2
        assert data["suggestions"][0]["type"] == "error-handling"
        assert data["suggestions"][0]["reason"] == "not yet practiced, recommended by reference corpus"
        assert data["requirements"][0]["rule_type"] == "global-overview"
        assert data["requirements"][0]["detected_from"] == "code-analysis"

    def test_requirements_only_has_no_report_keys(self, result):
        data = json.loads(JsonFormatter().format(AnalysisResult(requirements=result.requirements)))
        assert "suggestions" not in data
        assert len(data["requirements"]) == 5


class TestRichFormatter:
    def test_format_captures_output(self, result):
        console = Console(file=io.StringIO(), width=160, force_terminal=False, color_system=None)
        text = RichFormatter(console=console).format(result)
        assert "Summary" in text
        assert "Suggestions" in text
        assert "Use try-catch" in text
        assert "global-rules.mdc" in text
        assert "12" in text

    def test_no_suggestions_message(self):
        console = Console(file=io.StringIO(), width=120, color_system=None)
        text = RichFormatter(console=console).format(AnalysisResult(report=ReconciliationReport()))
        assert "No suggestions." in text
