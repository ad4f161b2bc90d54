"""PracticeExtractor: turns reference documents into deduplicated Practices.

Usage:
    extractor = PracticeExtractor(tech_stack=["React", "TypeScript"])
    practices = extractor.extract(documents)

A document that is malformed is skipped and logged; the run continues.
Zero practices is a valid outcome.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..exceptions import CorpusError, MalformedDocumentError
from ..logging_config import get_logger
from .models import CorpusDocument, Practice
from .sections import (
    categorize_heading,
    extract_points,
    infer_priority,
    match_tech_stack,
    split_sections,
)

logger = get_logger(__name__)


class PracticeExtractor:
    """Extracts categorized practices from section-delimited guidance text."""

    def __init__(
        self,
        tech_stack: Iterable[str] = (),
        min_point_length: int = 10,
        min_section_length: int = 20,
    ) -> None:
        self.tech_stack: tuple[str, ...] = tuple(dict.fromkeys(tech_stack))
        self.min_point_length = min_point_length
        self.min_section_length = min_section_length

    def extract(self, documents: Iterable[CorpusDocument]) -> list[Practice]:
        """Extract and deduplicate practices from all documents.

        Args:
            documents: Reference documents, optionally pre-tagged by category

        Returns:
            Practices in first-seen order, unique by ``(category, title)``
        """
        practices: list[Practice] = []
        parsed = 0
        for document in documents:
            try:
                extracted = self.parse_document(document)
            except CorpusError as e:
                logger.warning(f"Skipping corpus document: {e}")
                continue
            parsed += 1
            logger.debug(f"Extracted {len(extracted)} practices from {document.source}")
            practices.extend(extracted)

        unique = deduplicate(practices)
        logger.info(
            f"Extracted {len(unique)} practices ({len(practices)} before dedup) "
            f"from {parsed} documents"
        )
        return unique

    def parse_document(self, document: CorpusDocument) -> list[Practice]:
        """Parse one document into practices (no cross-document dedup).

        Raises:
            MalformedDocumentError: If the document text is not usable text
        """
        text = document.text
        if not isinstance(text, str):
            raise MalformedDocumentError(
                document.source, f"expected text, got {type(text).__name__}"
            )
        if "\x00" in text:
            raise MalformedDocumentError(document.source, "binary content")

        practices: list[Practice] = []
        for section in split_sections(text):
            category = categorize_heading(section.title, document.category)
            for point in extract_points(
                section.content, self.min_point_length, self.min_section_length
            ):
                practices.append(
                    Practice(
                        category=category,
                        title=point.title or section.title,
                        content=point.content,
                        related_tech_stack=match_tech_stack(point.content, self.tech_stack),
                        priority=infer_priority(point.content, category),
                    )
                )
        return practices


def deduplicate(practices: Sequence[Practice]) -> list[Practice]:
    """Keep one practice per ``(category, title)``: the one with the longest content.

    On equal length the first one seen wins. Output keeps first-seen key order.
    """
    seen: dict[tuple, Practice] = {}
    for practice in practices:
        existing: Optional[Practice] = seen.get(practice.key)
        if existing is None or len(practice.content) > len(existing.content):
            seen[practice.key] = practice
    return list(seen.values())
