"""Tests for dependency manifest parsing."""

import logging

from practice_insight.project.manifests import (
    parse_pyproject,
    parse_requirement,
    parse_requirements_txt,
    read_dependencies,
)


class TestPackageJson:
    def test_sections_in_order(self, sample_project):
        deps = read_dependencies(sample_project)
        assert [d.name for d in deps] == ["react", "react-router-dom", "zustand", "vitest"]
        assert deps[0].version == "^18.2.0"
        assert deps[-1].type == "development"

    def test_broken_package_json_skipped(self, tmp_path, write_tree, caplog):
        caplog.set_level(logging.WARNING, logger="practice_insight")
        root = write_tree(tmp_path / "proj", {"package.json": "{", "requirements.txt": "flask\n"})
        assert [d.name for d in read_dependencies(root)] == ["flask"]
        assert "package.json" in caplog.text

    def test_non_object_package_json_skipped(self, tmp_path, write_tree, caplog):
        caplog.set_level(logging.WARNING, logger="practice_insight")
        root = write_tree(tmp_path / "proj", {"package.json": "[]", "requirements.txt": "flask\n"})
        assert [d.name for d in read_dependencies(root)] == ["flask"]
        assert "expected a JSON object" in caplog.text


class TestRequirementsTxt:
    def test_undecodable_file_skipped(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="practice_insight")
        (tmp_path / "requirements.txt").write_bytes("flask==3.0\n".encode("utf-16"))
        (tmp_path / "requirements-dev.txt").write_text("pytest\n")
        assert [d.name for d in read_dependencies(tmp_path)] == ["pytest"]
        assert "requirements.txt" in caplog.text

    def test_parse_lines(self):
        text = "requests>=2.0  # http\n-r base.txt\n\nnumpy[extra]==1.26 ; python_version>'3'\n"
        deps = parse_requirements_txt(text)
        assert [(d.name, d.version) for d in deps] == [("requests", ">=2.0"), ("numpy", "==1.26")]

    def test_comment_only_line(self):
        assert parse_requirement("# nothing here") is None

    def test_dev_file_type(self, tmp_path, write_tree):
        root = write_tree(tmp_path / "proj", {"requirements-dev.txt": "pytest\n"})
        assert read_dependencies(root)[0].type == "development"


class TestPyproject:
    def test_pep621_and_poetry(self):
        data = {
            "project": {
                "dependencies": ["fastapi>=0.100", "uvicorn"],
                "optional-dependencies": {"test": ["pytest"]},
            },
            "tool": {
                "poetry": {
                    "dependencies": {"python": "^3.11", "django": {"version": "^4.2"}},
                    "group": {"dev": {"dependencies": {"black": "^23"}}},
                }
            },
        }
        deps = parse_pyproject(data)
        assert [(d.name, d.type) for d in deps] == [
            ("fastapi", "production"),
            ("uvicorn", "production"),
            ("pytest", "optional"),
            ("django", "production"),
            ("black", "development"),
        ]
        assert deps[3].version == "^4.2"

    def test_read_from_disk(self, tmp_path, write_tree):
        root = write_tree(
            tmp_path / "proj",
            {"pyproject.toml": '[project]\nname = "x"\ndependencies = ["Flask>=3"]\n'},
        )
        assert [d.name for d in read_dependencies(root)] == ["Flask"]

    def test_first_declaration_wins_across_manifests(self, tmp_path, write_tree):
        root = write_tree(
            tmp_path / "proj",
            {
                "requirements.txt": "Flask==2.0\n",
                "pyproject.toml": '[project]\nname = "x"\ndependencies = ["flask>=3"]\n',
            },
        )
        deps = read_dependencies(root)
        assert [(d.name, d.version) for d in deps] == [("Flask", "==2.0")]

    def test_no_manifests(self, tmp_path):
        assert read_dependencies(tmp_path) == []
