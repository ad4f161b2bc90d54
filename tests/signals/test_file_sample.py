"""Tests for FileSample and capped file sampling."""

import pytest

from practice_insight.signals import FileSample, read_files, sample_files, select_code_files


class TestFileSample:
    def test_each_file_counts_once(self):
        sample = FileSample(contents={"a.ts": "try catch try", "b.ts": "nothing", "c.ts": "catch"})
        assert sample.fraction_containing(["try", "catch"]) == pytest.approx(2 / 3)

    def test_keywords_lowered(self):
        sample = FileSample(contents={"a.ts": "usestate()"})
        assert sample.fraction_containing(["useState"]) == 1.0

    def test_empty_inputs(self):
        assert FileSample().fraction_containing(["react"]) == 0.0
        assert FileSample(contents={"a.ts": "react"}).fraction_containing([]) == 0.0
        assert FileSample(contents={"a.ts": "react"}).fraction_containing([""]) == 0.0

    def test_head_takes_first_paths(self):
        sample = FileSample(contents={"b.ts": "b", "a.ts": "a", "c.ts": "c"})
        assert list(sample.head(2).contents) == ["a.ts", "b.ts"]
        assert sample.head(10) is sample


class TestSampling:
    def test_select_code_files(self):
        files = ["z.ts", "README.md", "a.PY", "m.tsx"]
        assert select_code_files(files, {".ts", ".tsx", ".py"}, limit=2) == ["a.PY", "m.tsx"]

    def test_read_files_keeps_input_order(self, tmp_path, write_tree):
        write_tree(tmp_path / "p", {"b.ts": "b", "a.ts": "a", "c.ts": "c"})
        contents = read_files(tmp_path / "p", ["c.ts", "a.ts", "b.ts"], max_workers=3)
        assert list(contents) == ["c.ts", "a.ts", "b.ts"]

    def test_unreadable_file_absent(self, tmp_path, write_tree):
        write_tree(tmp_path / "p", {"a.ts": "a"})
        assert read_files(tmp_path / "p", ["a.ts", "missing.ts"]) == {"a.ts": "a"}

    def test_sample_files_caps_and_lowers(self, sample_project):
        files = ["src/components/Button.tsx", "src/errors.ts", "src/features/auth/login.ts"]
        sample = sample_files(sample_project, files, limit=2, extensions={".ts", ".tsx"})
        assert len(sample) == 2
        assert "autherror" in sample.contents["src/errors.ts"]
        assert "AuthError" not in sample.contents["src/errors.ts"]
