"""Text heuristics for reference documents.

Splits Markdown into sections, pulls practice points out of a section, and
infers category, priority and tech-stack tags from keywords. All functions
are pure; the extractor composes them.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from ..models import Category, Priority
from .models import PracticePoint, Section

PREAMBLE_TITLE = "Introduction"

_HEADING_RE = re.compile(r"^(#{1,3})\s+(.+?)\s*#*\s*$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")
_LIST_ITEM_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(.+)$")

# First matching category wins; order follows report precedence. Keywords are
# regex fragments matched at a word start; a trailing \b pins the whole word.
HEADING_KEYWORDS: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (Category.CODE_STYLE, ("style", "format", "convention")),
    (Category.ARCHITECTURE, ("architecture", "structure", "organization", "organisation")),
    (Category.ERROR_HANDLING, ("error", "exception", "handling")),
    (Category.PERFORMANCE, ("performance", "optimization", "optimisation", "speed")),
    (Category.SECURITY, ("security", r"auth(?:entication|orization|orisation|n|z)?\b", "secure")),
    (Category.TESTING, ("test",)),
    (Category.COMPONENT, ("component", r"ui\b", "react", "vue")),
    (Category.ROUTING, ("routing", "route")),
    (Category.STATE_MANAGEMENT, (r"state(?:s|ful)?\b", r"stores?\b", "redux", "zustand")),
)

HIGH_PRIORITY_KEYWORDS = ("must", "required", "always", "never", "critical", "essential")
LOW_PRIORITY_KEYWORDS = ("optional", "consider", "suggest", "recommend")

CATEGORY_DEFAULT_PRIORITY = {
    Category.SECURITY: Priority.HIGH,
    Category.ERROR_HANDLING: Priority.HIGH,
    Category.PERFORMANCE: Priority.MEDIUM,
    Category.TESTING: Priority.MEDIUM,
}


def _keyword_pattern(keywords: Iterable[str], escape: bool = True) -> re.Pattern:
    # Anchored at a word start only, so "test" matches "testing"
    fragments = (re.escape(k) if escape else k for k in keywords)
    return re.compile(r"\b(?:" + "|".join(fragments) + ")", re.IGNORECASE)


_HEADING_PATTERNS = tuple(
    (category, _keyword_pattern(kws, escape=False)) for category, kws in HEADING_KEYWORDS
)
_HIGH_RE = _keyword_pattern(HIGH_PRIORITY_KEYWORDS)
_LOW_RE = _keyword_pattern(LOW_PRIORITY_KEYWORDS)


def split_sections(text: str) -> list[Section]:
    """Split Markdown into sections at level 1-3 headings.

    Headings inside fenced blocks are content, not section breaks. Text before
    the first heading becomes an ``Introduction`` section. Sections with no
    body are dropped.
    """
    sections: list[Section] = []
    title = PREAMBLE_TITLE
    buffer: list[str] = []
    in_fence = False

    def flush() -> None:
        body = "\n".join(buffer).strip()
        if body:
            sections.append(Section(title=title, content=body))

    for line in text.splitlines():
        if _FENCE_RE.match(line):
            in_fence = not in_fence
            buffer.append(line)
            continue
        if not in_fence:
            match = _HEADING_RE.match(line)
            if match:
                flush()
                title = match.group(2).strip()
                buffer = []
                continue
        buffer.append(line)

    flush()
    return sections


def extract_points(
    content: str, min_point_length: int = 10, min_section_length: int = 20
) -> list[PracticePoint]:
    """Pull discrete practice points from one section body, in document order.

    Points are list items longer than ``min_point_length`` and fenced blocks
    introduced by a non-list explanatory line (which becomes the point title).
    If neither pattern yields anything, the whole body is a single point when
    it is longer than ``min_section_length``.
    """
    points: list[PracticePoint] = []
    last_line: Optional[str] = None
    last_is_item = False
    block: Optional[list[str]] = None
    explanation: Optional[str] = None

    for line in content.splitlines():
        if block is not None:
            block.append(line)
            if _FENCE_RE.match(line):
                if explanation:
                    points.append(PracticePoint(title=explanation, content="\n".join(block)))
                block = None
                last_line = None
            continue

        if _FENCE_RE.match(line):
            block = [line]
            explanation = last_line.strip() if last_line and not last_is_item else None
            continue

        if not line.strip():
            continue

        item = _LIST_ITEM_RE.match(line)
        if item:
            text = item.group(1).strip()
            if len(text) > min_point_length:
                points.append(PracticePoint(content=text))
        last_line = line
        last_is_item = item is not None

    # Unterminated fence runs to the end of the section
    if block is not None and explanation:
        points.append(PracticePoint(title=explanation, content="\n".join(block)))

    if not points:
        body = content.strip()
        if len(body) > min_section_length:
            points.append(PracticePoint(content=body))

    return points


def categorize_heading(title: str, default: Optional[str] = None) -> Category:
    """Map a section heading to a category by keyword, else the caller default."""
    for category, pattern in _HEADING_PATTERNS:
        if pattern.search(title):
            return category
    return Category.parse(default)


def infer_priority(content: str, category: Category) -> Priority:
    if _HIGH_RE.search(content):
        return Priority.HIGH
    if _LOW_RE.search(content):
        return Priority.LOW
    return CATEGORY_DEFAULT_PRIORITY.get(category, Priority.MEDIUM)


def match_tech_stack(content: str, vocabulary: Iterable[str]) -> frozenset[str]:
    """Subset of ``vocabulary`` mentioned in ``content`` (case-insensitive, whole names)."""
    found = set()
    for tech in vocabulary:
        if not tech:
            continue
        pattern = r"(?<![A-Za-z0-9])" + re.escape(tech) + r"(?![A-Za-z0-9])"
        if re.search(pattern, content, re.IGNORECASE):
            found.add(tech)
    return frozenset(found)
