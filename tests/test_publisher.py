"""Tests for comment formatting and publishing."""

from __future__ import annotations

import pytest

from renovate_ai.analysis.envelope import COMMENT_HEADER, wrap_analysis
from renovate_ai.config import RepoRef
from renovate_ai.exceptions import PublishError
from renovate_ai.github.models import AnalysisResult
from renovate_ai.github.publisher import CommentPublisher, format_comment

REPO = RepoRef(owner="acme", name="widgets")


class TestFormatComment:
    def test_plain_text_is_wrapped(self):
        body = format_comment("Looks safe.", "vllm")
        assert body.startswith(COMMENT_HEADER)
        assert "Looks safe." in body
        assert "self-hosted models (vllm)" in body

    def test_existing_header_kept_verbatim(self):
        wrapped = wrap_analysis("Looks safe.", "vllm/qwen3")
        assert format_comment(wrapped, "vllm") == wrapped

    def test_no_double_wrapping(self):
        once = format_comment("Looks safe.", "litellm")
        twice = format_comment(once, "litellm")
        assert twice == once
        assert twice.count(COMMENT_HEADER) == 1


class TestCommentPublisher:
    def test_posts_exactly_once(self, make_github):
        github = make_github()
        publisher = CommentPublisher(github, REPO, 42, "vllm")

        assert publisher.publish(AnalysisResult(body=wrap_analysis("ok", "vllm/qwen3")))
        assert github.calls == ["create_comment"]
        assert github.comments[0].count(COMMENT_HEADER) == 1

    def test_publish_error_surfaces(self, make_github):
        publisher = CommentPublisher(make_github(fail_publish=True), REPO, 42, "vllm")
        with pytest.raises(PublishError, match="acme/widgets#42"):
            publisher.publish(AnalysisResult(body="ok"))
