"""Shared vocabularies for the reconciliation engine.

Closed enumerations used across the corpus, comparison, suggestion and
requirement stages. Enum values are the kebab-case strings that appear in
reports and JSON output.
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Practice category. Declaration order is the report precedence."""

    CODE_STYLE = "code-style"
    ARCHITECTURE = "architecture"
    ERROR_HANDLING = "error-handling"
    PERFORMANCE = "performance"
    SECURITY = "security"
    TESTING = "testing"
    COMPONENT = "component"
    ROUTING = "routing"
    STATE_MANAGEMENT = "state-management"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: object) -> "Category":
        """Coerce a free-form tag into a Category.

        Unknown or empty tags map to GENERAL rather than raising, so an
        uncategorized practice still flows through the default band and the
        generic evaluator.
        """
        if isinstance(value, Category):
            return value
        if isinstance(value, str):
            tag = value.strip().lower().replace("_", "-").replace(" ", "-")
            for member in cls:
                if member.value == tag:
                    return member
        return cls.GENERAL

    @property
    def precedence(self) -> int:
        return CATEGORY_ORDER.index(self)


CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key: high sorts first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class Impact(str, Enum):
    GLOBAL = "global"
    MODULE = "module"
    FILE = "file"


class DetectedFrom(str, Enum):
    """Provenance of a requirement."""

    DEPENDENCY = "dependency"
    FILE_STRUCTURE = "file-structure"
    CONFIG = "config"
    CODE_ANALYSIS = "code-analysis"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Disposition(str, Enum):
    """Outcome assigned to a practice after comparison."""

    IGNORED = "ignored"
    MISSING = "missing"
    AMBIGUOUS = "ambiguous"
    ADOPTED = "adopted"
