"""Single model invocation for a dependency analysis."""

from __future__ import annotations

import logging

from renovate_ai.analysis.envelope import wrap_analysis
from renovate_ai.exceptions import CompletionError
from renovate_ai.github.models import AnalysisResult
from renovate_ai.llm.base import LLMProvider, Message

logger = logging.getLogger(__name__)

# Low temperature keeps repeated runs on the same PR close to each other.
TEMPERATURE = 0.3
MAX_TOKENS = 3000


class AnalysisOrchestrator:
    """Submits one prompt to the completion service and wraps the answer.

    No retries happen here; a failed call fails the run.
    """

    def __init__(self, llm: LLMProvider, provider_name: str) -> None:
        self.llm = llm
        self.provider_name = provider_name

    @property
    def source(self) -> str:
        return f"{self.provider_name}/{self.llm.model}"

    async def analyze(self, prompt: str) -> AnalysisResult:
        """Run the analysis.

        Raises:
            CompletionError: If the call fails or the model returns nothing.
        """
        logger.info("Running AI analysis with %s...", self.source)
        response = await self.llm.complete(
            [Message(role="user", content=prompt)],
            temperature=TEMPERATURE,
            max_tokens=MAX_TOKENS,
        )
        if not response.content.strip():
            raise CompletionError(
                f"completion from {self.source} returned no content "
                f"(finish_reason={response.finish_reason or 'unknown'})"
            )
        logger.debug("Completion usage: %s", response.usage)
        return AnalysisResult(body=wrap_analysis(response.content, self.source))
