"""Data models for the reference corpus and extracted practices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..models import Category, Priority


@dataclass(frozen=True)
class CorpusDocument:
    """One reference guidance text.

    Attributes:
        text: Section-delimited (Markdown) guidance text
        category: Optional pre-tag used when no heading keyword matches
        source: Human-readable origin used in logs (file path, URL, ...)
    """

    text: str
    category: Optional[str] = None
    source: str = "<memory>"


@dataclass(frozen=True)
class Section:
    title: str
    content: str


@dataclass(frozen=True)
class PracticePoint:
    """A discrete recommendation inside a section, before categorization."""

    content: str
    title: Optional[str] = None


@dataclass(frozen=True)
class Practice:
    """A categorized recommendation extracted from the corpus.

    Identity is ``(category, title)``; see ``key``.
    """

    category: Category
    title: str
    content: str
    related_tech_stack: frozenset[str] = field(default_factory=frozenset)
    priority: Priority = Priority.MEDIUM

    @property
    def key(self) -> tuple[Category, str]:
        return (self.category, self.title)

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "title": self.title,
            "content": self.content,
            "related_tech_stack": sorted(self.related_tech_stack),
            "priority": self.priority.value,
        }
