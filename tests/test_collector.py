"""Tests for diff collection and truncation."""

from __future__ import annotations

import logging

from renovate_ai.github.collector import (
    MAX_DIFF_CHARS,
    TRUNCATION_MARKER,
    collect_diffs,
    truncate_diff,
)
from renovate_ai.github.models import ChangedFile, FileDiff


class TestTruncateDiff:
    def test_short_diff_unchanged(self):
        assert truncate_diff("+foo") == "+foo"

    def test_exact_limit_unchanged(self):
        text = "x" * MAX_DIFF_CHARS
        assert truncate_diff(text) == text

    def test_long_diff_is_marked(self):
        text = "y" * (MAX_DIFF_CHARS + 500)
        result = truncate_diff(text)
        assert result.endswith(TRUNCATION_MARKER)
        assert len(result) <= MAX_DIFF_CHARS + len(TRUNCATION_MARKER)

    def test_stable_when_reapplied(self):
        once = truncate_diff("z" * 5000)
        assert truncate_diff(once) == once


class TestCollectDiffs:
    def test_keeps_only_dependency_files(self, go_mod_files):
        diffs = collect_diffs(go_mod_files)
        assert diffs == [FileDiff(file_name="go.mod", diff_text="-v1.2.0\n+v2.0.0")]

    def test_skips_files_without_patch(self):
        files = [ChangedFile(name="yarn.lock", patch=None), ChangedFile(name="go.sum", patch="+h1")]
        assert [d.file_name for d in collect_diffs(files)] == ["go.sum"]

    def test_preserves_order_and_duplicates(self):
        files = [
            ChangedFile(name="package.json", patch="a"),
            ChangedFile(name="Dockerfile", patch="b"),
            ChangedFile(name="package.json", patch="c"),
        ]
        diffs = collect_diffs(files)
        assert [d.file_name for d in diffs] == ["package.json", "Dockerfile", "package.json"]
        assert [d.diff_text for d in diffs] == ["a", "b", "c"]

    def test_truncates_long_patches(self):
        files = [ChangedFile(name="package-lock.json", patch="+" * 10_000)]
        (diff,) = collect_diffs(files)
        assert diff.diff_text.endswith(TRUNCATION_MARKER)
        assert len(diff.diff_text) == MAX_DIFF_CHARS + len(TRUNCATION_MARKER)

    def test_empty_when_nothing_matches(self):
        assert collect_diffs([ChangedFile(name="docs/readme.md", patch="+hi")]) == []

    def test_empty_input(self):
        assert collect_diffs([]) == []

    def test_logs_counts(self, go_mod_files, caplog):
        with caplog.at_level(logging.INFO, logger="renovate_ai"):
            collect_diffs(go_mod_files)
        assert "Found 1 dependency-related file(s) out of 2 total file(s)" in caplog.text
