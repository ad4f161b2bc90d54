"""Dual detectors for optional guidance-document categories.

Each detector pairs a dependency-name matcher (keywords matched against the
parts of each package name) with an evidence check over router signals,
code features or the practice sample. The evidence check returns a short
description when it fires, ``None`` otherwise.

Auxiliary families (styling, database, build tools) never produce a
requirement; they are only reported at debug level.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Sequence

from ..models import DetectedFrom
from ..signals.models import CodeFeature, Dependency, ProjectPractice, RouterSignal


@dataclass(frozen=True)
class EvidenceContext:
    """Everything an evidence check may consult."""

    routers: Sequence[RouterSignal] = ()
    code_features: Mapping[str, CodeFeature] = field(default_factory=dict)
    project_practice: Optional[ProjectPractice] = None

    def router(self, kind: str) -> Optional[RouterSignal]:
        for signal in self.routers:
            if signal.kind == kind:
                return signal
        return None

    def has_feature(self, name: str) -> bool:
        feature = self.code_features.get(name)
        return feature is not None and feature.frequency > 0


EvidenceCheck = Callable[[EvidenceContext], Optional[str]]


_NAME_SEPARATORS = re.compile(r"[@/._-]+")


def name_tokens(name: str) -> list[str]:
    """Lower-cased parts of a package name, split on ``@ / - . _``."""
    return [part for part in _NAME_SEPARATORS.split(name.lower()) if part]


def _matches(tokens: Sequence[str], keyword: Sequence[str]) -> bool:
    # each keyword part must start a consecutive name part, so "redux"
    # matches "@reduxjs/toolkit" but "ky" does not match "husky"
    width = len(keyword)
    for start in range(len(tokens) - width + 1):
        if all(tokens[start + i].startswith(part) for i, part in enumerate(keyword)):
            return True
    return False


def match_dependencies(
    dependencies: Sequence[Dependency], keywords: Sequence[str]
) -> list[str]:
    """Names of dependencies matching any keyword, in input order, without repeats."""
    split_keywords = [name_tokens(k) for k in keywords if name_tokens(k)]
    matched: list[str] = []
    for dep in dependencies:
        tokens = name_tokens(dep.name)
        if any(_matches(tokens, k) for k in split_keywords) and dep.name not in matched:
            matched.append(dep.name)
    return matched


@dataclass(frozen=True)
class CategoryDetector:
    rule_type: str
    document_name: str
    priority: int
    dependency_keywords: tuple[str, ...]
    evidence: EvidenceCheck
    evidence_source: DetectedFrom
    label: str


def _router_evidence(kind: str) -> EvidenceCheck:
    def check(ctx: EvidenceContext) -> Optional[str]:
        signal = ctx.router(kind)
        if signal is None:
            return None
        return f"{kind} routing files found ({signal.framework or 'unknown framework'})"

    return check


def _feature_evidence(*names: str) -> EvidenceCheck:
    def check(ctx: EvidenceContext) -> Optional[str]:
        found = [n for n in names if ctx.has_feature(n)]
        if not found:
            return None
        return f"code features found: {', '.join(found)}"

    return check


def _error_handling_evidence(ctx: EvidenceContext) -> Optional[str]:
    found = _feature_evidence("error-handling")(ctx)
    if found:
        return found
    practice = ctx.project_practice
    errors = practice.error_handling if practice else None
    if errors is not None and errors.frequency > 0:
        return f"error handling pattern found ({errors.type}, {errors.frequency} occurrences)"
    return None


OPTIONAL_DETECTORS: tuple[CategoryDetector, ...] = (
    CategoryDetector(
        rule_type="frontend-routing",
        document_name="frontend-routing.mdc",
        priority=85,
        dependency_keywords=(
            "react-router", "vue-router", "next", "nuxt", "remix", "sveltekit", "@sveltejs/kit",
        ),
        evidence=_router_evidence("frontend"),
        evidence_source=DetectedFrom.FILE_STRUCTURE,
        label="frontend routing",
    ),
    CategoryDetector(
        rule_type="backend-routing",
        document_name="api-routing.mdc",
        priority=85,
        dependency_keywords=(
            "express", "fastify", "koa", "hapi", "nestjs", "django", "flask", "fastapi", "gin",
        ),
        evidence=_router_evidence("backend"),
        evidence_source=DetectedFrom.FILE_STRUCTURE,
        label="backend routing",
    ),
    CategoryDetector(
        rule_type="state-management",
        document_name="state-management.mdc",
        priority=85,
        dependency_keywords=(
            "redux", "zustand", "mobx", "pinia", "vuex", "recoil", "jotai", "valtio",
        ),
        evidence=_feature_evidence("state-management"),
        evidence_source=DetectedFrom.CODE_ANALYSIS,
        label="state management",
    ),
    CategoryDetector(
        rule_type="ui-ux",
        document_name="ui-ux.mdc",
        priority=75,
        dependency_keywords=("react", "vue", "angular", "svelte", "preact", "solid"),
        evidence=_feature_evidence("custom-components"),
        evidence_source=DetectedFrom.FILE_STRUCTURE,
        label="UI framework",
    ),
    CategoryDetector(
        rule_type="testing",
        document_name="testing.mdc",
        priority=70,
        dependency_keywords=(
            "jest", "vitest", "mocha", "chai", "cypress", "playwright", "testing-library", "pytest",
        ),
        evidence=_feature_evidence("testing"),
        evidence_source=DetectedFrom.FILE_STRUCTURE,
        label="testing",
    ),
    CategoryDetector(
        rule_type="custom-tools",
        document_name="custom-tools.mdc",
        priority=95,
        dependency_keywords=("axios", "ky", "got", "undici", "node-fetch"),
        evidence=_feature_evidence("custom-hooks", "custom-utils", "api-client"),
        evidence_source=DetectedFrom.CODE_ANALYSIS,
        label="custom tooling",
    ),
    CategoryDetector(
        rule_type="error-handling",
        document_name="error-handling.mdc",
        priority=80,
        dependency_keywords=("sentry", "bugsnag", "rollbar"),
        evidence=_error_handling_evidence,
        evidence_source=DetectedFrom.CODE_ANALYSIS,
        label="error handling",
    ),
)

AUXILIARY_FAMILIES: Mapping[str, tuple[str, ...]] = {
    "styling": ("tailwind", "styled-components", "emotion", "sass", "less"),
    "database": ("prisma", "typeorm", "sequelize", "mongoose", "drizzle", "sqlalchemy"),
    "build tools": ("vite", "webpack", "rollup", "esbuild", "turbo", "nx"),
}
