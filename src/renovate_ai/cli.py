"""Command-line interface for Renovate AI."""

from __future__ import annotations

import asyncio
import logging
import os
import sys

import click

from renovate_ai import __version__
from renovate_ai.config import SUPPORTED_PROVIDERS, AnalyzerConfig, resolve_config
from renovate_ai.exceptions import RenovateAIError
from renovate_ai.github.client import GitHubClient
from renovate_ai.llm.factory import create_provider
from renovate_ai.pipeline import PipelineResult, run_analysis
from renovate_ai.ui.console import Console

console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("renovate_ai")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(console.log_handler(level))
    logger.setLevel(level)


def _fail(message: str) -> None:
    console.error(f"Error: {message}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="renovate-ai")
def main():
    """Renovate AI - breaking-change analysis for dependency update PRs."""
    pass


@main.command()
@click.option("--repo", default=None, help="Repository name (owner/repo). Falls back to GITHUB_REPOSITORY.")
@click.option("--pr-number", type=int, default=None, help="Pull request number.")
@click.option("--github-token", default=None, help="GitHub token. Falls back to GITHUB_TOKEN.")
@click.option(
    "--llm-url", default=None,
    help="LLM API base URL (default: http://localhost:8000/v1 for vLLM, "
         "http://localhost:4000/v1 for LiteLLM).",
)
@click.option("--llm-key", default=None, help="LLM API key (optional).")
@click.option(
    "--llm-provider", default=None,
    help=f"LLM provider: {' or '.join(SUPPORTED_PROVIDERS)} (default: vllm).",
)
@click.option("--model", default=None, help="Model name. Falls back to LLM_MODEL, then qwen3.")
@click.option("--github-api-url", default=None, help="GitHub API URL (for GitHub Enterprise).")
@click.option("--dry-run", is_flag=True, help="Print the comment instead of posting it.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def analyze(
    repo: str | None, pr_number: int | None, github_token: str | None,
    llm_url: str | None, llm_key: str | None, llm_provider: str | None,
    model: str | None, github_api_url: str | None, dry_run: bool, verbose: bool,
):
    """Analyze a dependency update PR and comment with the findings.

    Usage in CI:

        renovate-ai analyze --repo owner/repo --pr-number 42

    Exits 0 when no dependency files changed.
    """
    _configure_logging(verbose)

    try:
        config = resolve_config(
            repo=repo,
            pr_number=pr_number,
            github_token=github_token,
            llm_provider=llm_provider,
            llm_url=llm_url,
            llm_key=llm_key,
            model=model,
            github_api_url=github_api_url,
            environ=os.environ,
        )
    except RenovateAIError as e:
        _fail(str(e))

    _run(config, dry_run)


async def _execute(config: AnalyzerConfig, dry_run: bool) -> PipelineResult:
    github = GitHubClient(config.github_token, api_url=config.github_api_url)
    try:
        llm = create_provider(config.llm)
        try:
            return await run_analysis(config, github, llm, dry_run=dry_run)
        finally:
            await llm.close()
    finally:
        github.close()


def _run(config: AnalyzerConfig, dry_run: bool) -> None:
    try:
        result = asyncio.run(_execute(config, dry_run))
    except RenovateAIError as e:
        _fail(str(e))

    if result.skipped:
        console.info("No dependency file changes detected. Skipping analysis.")
        return

    console.show_diffs(result.diffs, result.total_files)
    if dry_run:
        click.echo(result.comment)
        console.warning("Dry run: comment not posted")
        return

    console.success(f"Posted analysis comment to PR #{config.pr_number}")
    console.success("Analysis complete!")
