"""Publish the analysis as a pull request comment."""

from __future__ import annotations

import logging

from renovate_ai.analysis.envelope import has_header, wrap_analysis
from renovate_ai.config import RepoRef
from renovate_ai.github.client import GitHubClient
from renovate_ai.github.models import AnalysisResult

logger = logging.getLogger(__name__)


def format_comment(body: str, provider: str) -> str:
    """Return the comment body, wrapping it only if it has no header yet."""
    if has_header(body):
        return body
    return wrap_analysis(body, provider)


class CommentPublisher:
    """Posts exactly one new comment per call.

    Earlier comments from previous runs are left alone, so re-running CI on the
    same pull request adds another comment.
    """

    def __init__(self, client: GitHubClient, repo: RepoRef, pr_number: int, provider: str) -> None:
        self.client = client
        self.repo = repo
        self.pr_number = pr_number
        self.provider = provider

    def render(self, analysis: AnalysisResult) -> str:
        return format_comment(analysis.body, self.provider)

    def publish(self, analysis: AnalysisResult) -> bool:
        """Post the analysis.

        Raises:
            PublishError: If GitHub rejects the write.
        """
        body = self.render(analysis)
        comment_id = self.client.create_comment(self.repo, self.pr_number, body)
        logger.info("Posted analysis comment %s to %s#%d", comment_id, self.repo, self.pr_number)
        return True
