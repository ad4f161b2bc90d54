"""Tests for PracticeExtractor."""

import logging
import textwrap

from practice_insight.corpus import CorpusDocument, PracticeExtractor, deduplicate
from practice_insight.models import Category, Priority


def doc(text, category=None, source="doc.md"):
    return CorpusDocument(text=textwrap.dedent(text), category=category, source=source)


class TestPracticeExtractor:
    def test_list_items_take_section_title(self):
        practices = PracticeExtractor().extract(
            [doc("## Testing\n\n- Write a unit test for each reducer\n")]
        )
        assert len(practices) == 1
        assert practices[0].category == Category.TESTING
        assert practices[0].title == "Testing"
        assert practices[0].content == "Write a unit test for each reducer"
        assert practices[0].priority == Priority.MEDIUM

    def test_same_section_items_collapse_to_longest(self):
        practices = PracticeExtractor().extract(
            [
                doc(
                    """\
                    ## Code Style

                    - Prefer arrow functions for callbacks
                    - Always use const and let instead of var
                    """
                )
            ]
        )
        assert len(practices) == 1
        assert practices[0].content == "Always use const and let instead of var"
        assert practices[0].priority == Priority.HIGH

    def test_code_block_uses_explanation_title(self):
        practices = PracticeExtractor().extract(
            [
                doc(
                    """\
                    ## Error Handling

                    Wrap handlers like this:
                    ```ts
                    try { run() } catch (e) { report(e) }
                    ```
                    """
                )
            ]
        )
        assert len(practices) == 1
        assert practices[0].title == "Wrap handlers like this:"
        assert practices[0].category == Category.ERROR_HANDLING
        assert practices[0].priority == Priority.HIGH

    def test_document_category_used_without_heading_keyword(self):
        practices = PracticeExtractor().extract(
            [doc("# Tips\n\n- Keep route loaders small and pure\n", category="routing")]
        )
        assert practices[0].category == Category.ROUTING

    def test_unknown_document_category_is_general(self):
        practices = PracticeExtractor().extract(
            [doc("# Tips\n\n- Keep everything boring and simple\n", category="misc")]
        )
        assert practices[0].category == Category.GENERAL

    def test_tech_stack_tagging(self):
        extractor = PracticeExtractor(tech_stack=["React", "Vue"])
        practices = extractor.extract(
            [doc("# Components\n\n- Use React function components everywhere\n")]
        )
        assert practices[0].related_tech_stack == frozenset({"React"})

    def test_empty_corpus(self):
        assert PracticeExtractor().extract([]) == []

    def test_malformed_document_skipped(self, caplog):
        caplog.set_level(logging.WARNING, logger="practice_insight")
        documents = [
            CorpusDocument(text="binary\x00data", source="blob.md"),
            doc("# Testing\n\n- Always write unit tests for reducers\n"),
        ]
        practices = PracticeExtractor().extract(documents)
        assert [p.category for p in practices] == [Category.TESTING]
        assert "blob.md" in caplog.text

    def test_cross_document_dedup_keeps_first_position(self):
        documents = [
            doc("# Testing\n\n- Write tests first\n", source="a.md"),
            doc("# Security\n\n- Never log secrets\n", source="b.md"),
            doc("# Testing\n\n- Write tests before fixing any bug\n", source="c.md"),
        ]
        practices = PracticeExtractor().extract(documents)
        assert [p.title for p in practices] == ["Testing", "Security"]
        assert practices[0].content == "Write tests before fixing any bug"

    def test_extraction_is_deterministic(self):
        documents = [doc("# Code Style\n\n- Always use strict equality checks\n## Testing\n\nTest every exported function.")]
        extractor = PracticeExtractor(tech_stack=["React"])
        assert extractor.extract(documents) == extractor.extract(documents)


class TestDeduplicate:
    def test_equal_length_keeps_first(self, practice_factory):
        first = practice_factory("aaaa", title="same")
        second = practice_factory("bbbb", title="same")
        assert deduplicate([first, second]) == [first]

    def test_key_includes_category(self, practice_factory):
        a = practice_factory("one rule", title="same", category=Category.TESTING)
        b = practice_factory("two rule", title="same", category=Category.SECURITY)
        assert deduplicate([a, b]) == [a, b]
