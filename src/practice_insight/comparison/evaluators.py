"""Category evaluators — score how strongly project signals corroborate a practice.

Each evaluator maps textual cues in ``practice.content`` onto one signal
structure and returns a UsageScore in [0, 1]. Evaluators are selected by
category from a lookup table; anything without a dedicated evaluator
(performance, security, testing, routing, state-management, general) uses
the generic keyword evaluator over the sampled files.

Missing signals score 0.0. No evaluator raises on absent input.

Scores:
    code-style      cue matches dominant style 1.0, mixed style 0.5 (+ mixed flag)
    error-handling  same catch style 1.0, the other catch style 0.3,
                    custom error classes present 1.0
    component       functional 1.0 / mixed 0.5, named state library 0.8
    architecture    feature-based + feature/module directories 0.7
    generic         fraction of sampled files containing any extracted keyword
"""

from __future__ import annotations

import re
from typing import Mapping, Optional, Protocol

from ..corpus.models import Practice
from ..models import Category
from ..signals.models import ProjectSignals
from .models import UsageScore

MIXED_SCORE = 0.5
PARTIAL_CATCH_SCORE = 0.3
STATE_LIBRARY_SCORE = 0.8
FEATURE_LAYOUT_SCORE = 0.7

FEATURE_PURPOSES = frozenset({"feature", "module"})


class Evaluator(Protocol):
    """Scores one practice against the project's signals."""

    name: str

    def assess(self, practice: Practice, signals: ProjectSignals) -> UsageScore: ...


def _match_style(project_value: str, advocated: str) -> Optional[UsageScore]:
    if project_value == advocated:
        return UsageScore(1.0)
    if project_value == "mixed":
        return UsageScore(MIXED_SCORE, mixed=True)
    return None


def _best(scores: list[UsageScore]) -> UsageScore:
    if not scores:
        return UsageScore()
    top = max(s.percentage for s in scores)
    mixed = any(s.mixed for s in scores) and top < 1.0
    return UsageScore(top, mixed=mixed)


class CodeStyleEvaluator:
    """Variable declarations, function style, quotes and semicolons."""

    name = "code_style"

    _CONST_LET = re.compile(r"\b(?:const|let)\b")
    _ARROW = re.compile(r"arrow[\s-]+function|=>")
    _FUNCTION_DECL = re.compile(r"function declarations?|function keyword")
    _QUOTES = (
        (re.compile(r"single[\s-]+quot"), "single"),
        (re.compile(r"double[\s-]+quot"), "double"),
        (re.compile(r"backtick|template literal"), "backtick"),
    )
    _NO_SEMICOLON = re.compile(r"(?:no|omit|without|avoid)\s+(?:trailing\s+)?semicolons?")
    _SEMICOLON = re.compile(r"semicolon")

    def assess(self, practice: Practice, signals: ProjectSignals) -> UsageScore:
        style = signals.practice.code_style
        if style is None:
            return UsageScore()

        text = practice.content.lower()
        scores: list[UsageScore] = []

        def check(project_value: str, advocated: str) -> None:
            score = _match_style(project_value, advocated)
            if score is not None:
                scores.append(score)

        if self._CONST_LET.search(text):
            check(style.variable_declaration, "const-let")
        if self._ARROW.search(text):
            check(style.function_style, "arrow")
        elif self._FUNCTION_DECL.search(text):
            check(style.function_style, "function")
        for pattern, quote in self._QUOTES:
            if pattern.search(text):
                check(style.string_quote, quote)
                break
        if self._NO_SEMICOLON.search(text):
            check(style.semicolon, "never")
        elif self._SEMICOLON.search(text):
            check(style.semicolon, "always")

        return _best(scores)


class ErrorHandlingEvaluator:
    """Catch style and custom error types."""

    name = "error_handling"

    _TRY_CATCH = re.compile(r"try[\s/-]*(?:catch|except)")
    _PROMISE_CATCH = re.compile(r"promise\.catch|\.catch\(")
    _CUSTOM_ERROR = re.compile(r"custom error|error class|exception class|custom exception")

    def assess(self, practice: Practice, signals: ProjectSignals) -> UsageScore:
        errors = signals.practice.error_handling
        if errors is None:
            return UsageScore()

        text = practice.content.lower()
        score = 0.0

        if self._TRY_CATCH.search(text):
            if errors.type == "try-catch":
                score = max(score, 1.0)
            elif errors.type == "promise-catch":
                score = max(score, PARTIAL_CATCH_SCORE)

        if self._PROMISE_CATCH.search(text):
            if errors.type == "promise-catch":
                score = max(score, 1.0)
            elif errors.type == "try-catch":
                score = max(score, PARTIAL_CATCH_SCORE)

        if self._CUSTOM_ERROR.search(text) and errors.custom_error_types:
            score = 1.0

        return UsageScore(score)


class ComponentEvaluator:
    """Component type and state-management libraries."""

    name = "component"

    _FUNCTIONAL = re.compile(r"functional components?|function components?")

    def assess(self, practice: Practice, signals: ProjectSignals) -> UsageScore:
        component = signals.practice.component_pattern
        if component is None:
            return UsageScore()

        text = practice.content.lower()
        score = 0.0

        if self._FUNCTIONAL.search(text):
            if component.type == "functional":
                score = 1.0
            elif component.type == "mixed":
                score = MIXED_SCORE

        for library in component.state_management:
            if library and library.lower() in text:
                score = max(score, STATE_LIBRARY_SCORE)

        return UsageScore(score)


class ArchitectureEvaluator:
    """Feature-based layout against inferred directory purposes."""

    name = "architecture"

    _FEATURE_BASED = re.compile(r"feature[\s-]+based")

    def assess(self, practice: Practice, signals: ProjectSignals) -> UsageScore:
        if not self._FEATURE_BASED.search(practice.content.lower()):
            return UsageScore()
        if any(d.purpose in FEATURE_PURPOSES for d in signals.directory_purposes):
            return UsageScore(FEATURE_LAYOUT_SCORE)
        return UsageScore()


class GenericKeywordEvaluator:
    """Fraction of sampled files mentioning any keyword drawn from the practice.

    Args:
        sample_limit: Max sampled files considered, applied on top of the
            sample the caller built
    """

    name = "generic"

    _TECH_NAMES = re.compile(
        r"\b(React|Vue|Angular|Svelte|Next\.js|TypeScript|JavaScript|Node\.js|Express"
        r"|Tailwind|CSS|HTML)\b",
        re.IGNORECASE,
    )
    _API_NAMES = re.compile(r"\b((?:use|create|get)[A-Z]\w+)\b")
    _TRY_CATCH = re.compile(r"try[\s/-]*catch", re.IGNORECASE)
    _ASYNC_AWAIT = re.compile(r"async[\s/-]*await", re.IGNORECASE)

    def __init__(self, sample_limit: int = 50) -> None:
        self.sample_limit = sample_limit

    def assess(self, practice: Practice, signals: ProjectSignals) -> UsageScore:
        sample = signals.file_sample
        if sample is None or len(sample) == 0:
            return UsageScore()
        keywords = self.extract_keywords(practice)
        if not keywords:
            return UsageScore()
        return UsageScore(sample.head(self.sample_limit).fraction_containing(keywords))

    def extract_keywords(self, practice: Practice) -> list[str]:
        """Tech names, API-shaped identifiers and try/catch, async/await tokens."""
        content = practice.content
        keywords: list[str] = [m.lower() for m in self._TECH_NAMES.findall(content)]
        keywords.extend(t.lower() for t in sorted(practice.related_tech_stack))
        keywords.extend(self._API_NAMES.findall(content))
        if self._TRY_CATCH.search(content):
            keywords.extend(["try", "catch"])
        if self._ASYNC_AWAIT.search(content):
            keywords.extend(["async", "await"])
        return list(dict.fromkeys(keywords))


def build_evaluators(sample_limit: int = 50) -> tuple[Mapping[Category, Evaluator], Evaluator]:
    """Build the category lookup table and the fallback evaluator."""
    table: dict[Category, Evaluator] = {
        Category.CODE_STYLE: CodeStyleEvaluator(),
        Category.ERROR_HANDLING: ErrorHandlingEvaluator(),
        Category.COMPONENT: ComponentEvaluator(),
        Category.ARCHITECTURE: ArchitectureEvaluator(),
    }
    return table, GenericKeywordEvaluator(sample_limit=sample_limit)
