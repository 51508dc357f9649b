"""Shared test fixtures for Renovate AI."""

from __future__ import annotations

import pytest

from renovate_ai.config import AnalyzerConfig, LLMConfig, RepoRef
from renovate_ai.exceptions import CompletionError, PublishError
from renovate_ai.github.models import ChangedFile, PullRequestSummary
from renovate_ai.llm.base import LLMProvider, LLMResponse, Message


class FakeGitHub:
    """In-memory stand-in for GitHubClient that records every call."""

    def __init__(
        self,
        files: list[ChangedFile] | None = None,
        summary: PullRequestSummary | None = None,
        fail_publish: bool = False,
    ) -> None:
        self.files = files or []
        self.summary = summary or PullRequestSummary(title="Update deps", description="")
        self.fail_publish = fail_publish
        self.calls: list[str] = []
        self.comments: list[str] = []
        self.closed = False

    def get_pull_request(self, repo: RepoRef, number: int) -> PullRequestSummary:
        self.calls.append("get_pull_request")
        return self.summary

    def list_changed_files(self, repo: RepoRef, number: int) -> list[ChangedFile]:
        self.calls.append("list_changed_files")
        return list(self.files)

    def create_comment(self, repo: RepoRef, number: int, body: str) -> int:
        self.calls.append("create_comment")
        if self.fail_publish:
            raise PublishError(f"failed to post comment to {repo}#{number}: 403 Forbidden")
        self.comments.append(body)
        return len(self.comments)

    def close(self) -> None:
        self.closed = True


class FakeLLM(LLMProvider):
    """LLM provider double returning a canned completion."""

    def __init__(self, content: str = "No breaking changes detected.", error: Exception | None = None):
        super().__init__(model="qwen3")
        self.content = content
        self.error = error
        self.requests: list[dict] = []
        self.closed = False

    async def complete(
        self,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        self.requests.append({
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, finish_reason="stop")

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> AnalyzerConfig:
    return AnalyzerConfig(
        repo=RepoRef(owner="acme", name="widgets"),
        pr_number=42,
        github_token="ghp_test",
        llm=LLMConfig(provider="vllm", model="qwen3"),
    )


@pytest.fixture
def go_mod_files() -> list[ChangedFile]:
    return [
        ChangedFile(name="README.md", patch="-old\n+new"),
        ChangedFile(name="go.mod", patch="-v1.2.0\n+v2.0.0"),
    ]


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def failing_llm() -> FakeLLM:
    return FakeLLM(error=CompletionError("connection refused"))


@pytest.fixture
def make_github():
    """Factory for FakeGitHub instances."""
    return FakeGitHub


@pytest.fixture
def make_llm():
    """Factory for FakeLLM instances."""
    return FakeLLM
