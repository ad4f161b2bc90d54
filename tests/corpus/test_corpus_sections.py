"""Tests for the Markdown section and point heuristics."""

import textwrap

import pytest

from practice_insight.corpus.sections import (
    PREAMBLE_TITLE,
    categorize_heading,
    extract_points,
    infer_priority,
    match_tech_stack,
    split_sections,
)
from practice_insight.models import Category, Priority


class TestSplitSections:
    def test_headings_delimit_sections(self):
        text = "# Title\n\nintro text\n\n## Code Style\n\n- item one here\n### Naming\nuse camelCase"
        sections = split_sections(text)
        assert [s.title for s in sections] == ["Title", "Code Style", "Naming"]
        assert sections[1].content == "- item one here"

    def test_text_before_first_heading_is_introduction(self):
        sections = split_sections("Read this first.\n\n# Testing\n\nwrite tests")
        assert sections[0].title == PREAMBLE_TITLE
        assert sections[0].content == "Read this first."

    def test_empty_sections_dropped(self):
        sections = split_sections("# Empty\n\n## Also Empty\n## Full\n\nbody")
        assert [s.title for s in sections] == ["Full"]

    def test_heading_inside_fence_is_content(self):
        text = textwrap.dedent(
            """\
            ## Examples
            ```md
            # not a heading
            ```
            """
        )
        sections = split_sections(text)
        assert len(sections) == 1
        assert "# not a heading" in sections[0].content

    def test_level_four_heading_is_not_a_break(self):
        sections = split_sections("## Style\n#### detail\nbody")
        assert len(sections) == 1

    def test_no_text(self):
        assert split_sections("") == []


class TestExtractPoints:
    def test_list_items_longer_than_minimum(self):
        points = extract_points("- short\n- Always use strict equality\n1. Prefer named exports")
        assert [p.content for p in points] == ["Always use strict equality", "Prefer named exports"]
        assert all(p.title is None for p in points)

    def test_code_block_with_explanation(self):
        content = textwrap.dedent(
            """\
            Wrap handlers like this:
            ```ts
            try { run() } catch (e) { report(e) }
            ```
            """
        )
        points = extract_points(content)
        assert len(points) == 1
        assert points[0].title == "Wrap handlers like this:"
        assert points[0].content.startswith("```ts")
        assert points[0].content.endswith("```")

    def test_code_block_after_list_item_has_no_explanation(self):
        content = "- Use guards for every handler\n```ts\nguard()\n```"
        points = extract_points(content)
        assert [p.content for p in points] == ["Use guards for every handler"]

    def test_fallback_to_whole_section(self):
        body = "Keep modules small and focused on a single concern."
        points = extract_points(body)
        assert len(points) == 1
        assert points[0].content == body

    def test_short_section_yields_nothing(self):
        assert extract_points("use const and let") == []

    def test_custom_minimums(self):
        assert extract_points("- tiny rule", min_point_length=20, min_section_length=100) == []
        assert len(extract_points("- tiny rule", min_point_length=5)) == 1


class TestCategorizeHeading:
    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Code Style", Category.CODE_STYLE),
            ("Formatting rules", Category.CODE_STYLE),
            ("Project Structure", Category.ARCHITECTURE),
            ("Error Handling", Category.ERROR_HANDLING),
            ("Performance", Category.PERFORMANCE),
            ("Authentication", Category.SECURITY),
            ("Testing", Category.TESTING),
            ("React Components", Category.COMPONENT),
            ("Routing", Category.ROUTING),
            ("State", Category.STATE_MANAGEMENT),
        ],
    )
    def test_keywords(self, title, expected):
        assert categorize_heading(title) == expected

    def test_first_keyword_wins(self):
        # "style" (code-style) precedes "component"
        assert categorize_heading("Component Style") == Category.CODE_STYLE

    def test_keyword_must_start_a_word(self):
        assert categorize_heading("Guidelines") == Category.GENERAL

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Statements and Expressions", Category.GENERAL),
            ("Authoring Docs", Category.GENERAL),
            ("Local Storage", Category.GENERAL),
            ("Build Guides", Category.GENERAL),
            ("Auth", Category.SECURITY),
            ("Authorization Rules", Category.SECURITY),
            ("Stateful Widgets", Category.STATE_MANAGEMENT),
            ("Global Stores", Category.STATE_MANAGEMENT),
            ("UI/UX", Category.COMPONENT),
        ],
    )
    def test_short_stems_match_whole_words(self, title, expected):
        assert categorize_heading(title) == expected

    def test_default_when_no_keyword(self):
        assert categorize_heading("Tips", "routing") == Category.ROUTING
        assert categorize_heading("Tips", "made-up") == Category.GENERAL
        assert categorize_heading("Tips") == Category.GENERAL

    def test_heading_keyword_beats_default(self):
        assert categorize_heading("Testing", "security") == Category.TESTING


class TestInferPriority:
    def test_high_keyword(self):
        assert infer_priority("You must validate input", Category.GENERAL) == Priority.HIGH

    def test_low_keyword(self):
        assert infer_priority("Consider lazy loading", Category.SECURITY) == Priority.LOW

    def test_high_beats_low(self):
        assert infer_priority("Always consider caching", Category.GENERAL) == Priority.HIGH

    def test_category_default(self):
        assert infer_priority("Hash passwords", Category.SECURITY) == Priority.HIGH
        assert infer_priority("Use indexes", Category.PERFORMANCE) == Priority.MEDIUM
        assert infer_priority("Name things well", Category.CODE_STYLE) == Priority.MEDIUM


class TestMatchTechStack:
    def test_case_insensitive_whole_names(self):
        found = match_tech_stack("Use react hooks with Next.js", ["React", "Next.js", "Vue"])
        assert found == frozenset({"React", "Next.js"})

    def test_no_partial_word_match(self):
        assert match_tech_stack("Prefer Preact for widgets", ["React"]) == frozenset()
