"""Dependency-update analysis pipeline.

Runs the stages in a fixed order:
1. Fetch the pull request and its changed files
2. Keep the dependency files and bound their diffs
3. Assemble the analysis prompt
4. Ask the model once
5. Post the result as a new PR comment

Nothing is written anywhere until the last stage, so a failure at any point
leaves the pull request untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from renovate_ai.analysis.orchestrator import AnalysisOrchestrator
from renovate_ai.analysis.prompts import TEMPLATE_VERSION, assemble_prompt
from renovate_ai.config import AnalyzerConfig
from renovate_ai.exceptions import CompletionError
from renovate_ai.github.client import GitHubClient
from renovate_ai.github.collector import collect_diffs
from renovate_ai.github.models import FileDiff
from renovate_ai.github.publisher import CommentPublisher
from renovate_ai.llm.base import LLMProvider

logger = logging.getLogger(__name__)

STATUS_SKIPPED = "skipped"
STATUS_POSTED = "posted"
STATUS_DRY_RUN = "dry_run"


@dataclass
class PipelineResult:
    """Outcome of one analysis run."""

    status: str
    diffs: list[FileDiff] = field(default_factory=list)
    comment: str = ""
    total_files: int = 0

    @property
    def skipped(self) -> bool:
        return self.status == STATUS_SKIPPED


async def run_analysis(
    config: AnalyzerConfig,
    github: GitHubClient,
    llm: LLMProvider,
    dry_run: bool = False,
) -> PipelineResult:
    """Run the full analysis for the pull request named in ``config``.

    Returns a skipped result, without calling the model or GitHub's write
    endpoint, when no dependency file changed.

    Raises:
        FetchError, CompletionError, PublishError: The failing stage's error.
    """
    repo, number = config.repo, config.pr_number
    # GitHub calls block the loop; nothing else runs concurrently with them.
    logger.info("Analyzing PR #%d in %s...", number, repo)

    summary = github.get_pull_request(repo, number)
    files = github.list_changed_files(repo, number)

    diffs = collect_diffs(files)
    if not diffs:
        logger.info("No dependency file changes detected. Skipping analysis.")
        return PipelineResult(status=STATUS_SKIPPED, total_files=len(files))

    prompt = assemble_prompt(summary, diffs)
    logger.debug("Assembled prompt (template v%s, %d chars)", TEMPLATE_VERSION, len(prompt))

    orchestrator = AnalysisOrchestrator(llm, config.llm.provider)
    try:
        analysis = await orchestrator.analyze(prompt)
    except CompletionError as e:
        raise CompletionError(f"AI analysis failed for {repo}#{number}: {e}") from e

    publisher = CommentPublisher(github, repo, number, config.llm.provider)
    if dry_run:
        return PipelineResult(
            status=STATUS_DRY_RUN,
            diffs=diffs,
            comment=publisher.render(analysis),
            total_files=len(files),
        )

    publisher.publish(analysis)
    return PipelineResult(
        status=STATUS_POSTED,
        diffs=diffs,
        comment=publisher.render(analysis),
        total_files=len(files),
    )
