"""Shared test fixtures for Practice Insight."""

import json
import os
import textwrap

import pytest

from practice_insight.corpus.models import Practice
from practice_insight.models import Category, Priority
from practice_insight.signals.models import (
    CodeStylePattern,
    ComponentPattern,
    ErrorHandlingPattern,
    ProjectPractice,
    ProjectSignals,
)


def make_practice(
    content="use const and let",
    category=Category.CODE_STYLE,
    title=None,
    priority=Priority.MEDIUM,
    tech=(),
):
    """Build a Practice with sensible defaults."""
    return Practice(
        category=category,
        title=title or content[:40],
        content=content,
        related_tech_stack=frozenset(tech),
        priority=priority,
    )


def write_files(root, files):
    """Write a {relative_path: text} mapping under root."""
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and PRACTICE_INSIGHT_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("PRACTICE_INSIGHT_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def practice_factory():
    return make_practice


@pytest.fixture
def write_tree():
    return write_files


@pytest.fixture
def empty_signals():
    """Signals with every part absent."""
    return ProjectSignals()


@pytest.fixture
def modern_signals():
    """A project with const/let, arrow functions and try/catch."""
    return ProjectSignals(
        practice=ProjectPractice(
            code_style=CodeStylePattern(
                variable_declaration="const-let",
                function_style="arrow",
                string_quote="single",
                semicolon="always",
            ),
            error_handling=ErrorHandlingPattern(type="try-catch", frequency=12),
            component_pattern=ComponentPattern(
                type="functional", export_style="named", state_management=("useState", "zustand")
            ),
        )
    )


@pytest.fixture
def corpus_dir(tmp_path):
    """A small reference corpus with a categorized sub-directory."""
    root = tmp_path / "corpus"
    write_files(
        root,
        {
            "react.md": """\
                # React Guide

                ## Code Style

                - Always use const and let instead of var
                - Prefer arrow functions for callbacks

                ## Error Handling

                - Wrap async calls in try-catch blocks
                - Create a custom error class per domain

                ## Performance

                - Consider memoizing expensive selectors with useMemo
                """,
            "security/auth.md": """\
                # Guidelines

                - Never store tokens in localStorage
                """,
            "notes.json": "{}",
        },
    )
    return root


@pytest.fixture
def sample_project(tmp_path):
    """A small React project on disk."""
    root = tmp_path / "app"
    write_files(
        root,
        {
            "package.json": json.dumps(
                {
                    "dependencies": {"react": "^18.2.0", "react-router-dom": "^6.0.0", "zustand": "^4.0.0"},
                    "devDependencies": {"vitest": "^1.0.0"},
                }
            ),
            "src/components/Button.tsx": """\
                import React from 'react';

                export const Button = ({ label }) => {
                  return <button>{label}</button>;
                };
                """,
            "src/features/auth/login.ts": """\
                export const login = async (user) => {
                  try {
                    const res = await fetch('/api/login');
                    return res.json();
                  } catch (err) {
                    throw new AuthError('login failed');
                  }
                };
                """,
            "src/errors.ts": """\
                export class AuthError extends Error {}
                """,
            "src/pages/index.tsx": """\
                export const Home = () => {
                  const [count, setCount] = useState(0);
                  return null;
                };
                """,
            "src/hooks/useAuth.ts": """\
                export const useAuth = () => {
                  const token = 'x';
                  return token;
                };
                """,
            "src/utils/format.test.ts": """\
                import { describe, it } from 'vitest';
                """,
            "node_modules/react/index.js": "var x = 1;",
        },
    )
    return root
