"""Tests for tech stack detection."""

from practice_insight.project import detect_tech_stack, discover_files, read_dependencies
from practice_insight.project.stack import framework_for
from practice_insight.signals import Dependency


def deps(*names):
    return [Dependency(name) for name in names]


class TestFrameworkFor:
    def test_exact_names(self):
        assert framework_for("react") == "React"
        assert framework_for("next") == "Next.js"
        assert framework_for("Flask") == "Flask"

    def test_scoped_packages(self):
        assert framework_for("@vue/compiler-sfc") == "Vue"
        assert framework_for("@angular/router") == "Angular"
        assert framework_for("@nestjs/core") == "NestJS"

    def test_related_packages_are_not_frameworks(self):
        assert framework_for("react-dom") is None
        assert framework_for("preact") is None
        assert framework_for("next-auth") is None


class TestDetectTechStack:
    def test_react_typescript_project(self, sample_project):
        stack = detect_tech_stack(read_dependencies(sample_project), discover_files(sample_project))
        assert stack == ["React", "TypeScript"]

    def test_frameworks_in_dependency_order(self):
        assert detect_tech_stack(deps("vue", "tailwindcss", "express")) == ["Vue", "Tailwind", "Express"]

    def test_extension_frameworks_and_languages(self):
        files = ["main.js", "App.svelte", "package.json", "scripts/build.py"]
        assert detect_tech_stack([], files) == ["Svelte", "JavaScript", "Python"]

    def test_manifest_implies_language(self):
        assert detect_tech_stack(deps("django"), ["requirements.txt"]) == ["Django", "Python"]

    def test_nested_manifest_ignored(self):
        assert detect_tech_stack([], ["vendor/go.mod"]) == []

    def test_no_repeats(self):
        assert detect_tech_stack(deps("vue", "@vue/router"), ["App.vue"]) == ["Vue"]

    def test_typescript_dependency(self):
        assert detect_tech_stack(deps("typescript"), ["package.json", "index.js"]) == ["TypeScript"]
