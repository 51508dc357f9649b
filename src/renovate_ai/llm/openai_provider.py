"""OpenAI-compatible LLM provider (vLLM, LiteLLM)."""

from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI, OpenAIError

from renovate_ai.exceptions import CompletionError
from renovate_ai.llm.base import LLMProvider, LLMResponse, Message


class OpenAIProvider(LLMProvider):
    """Provider for OpenAI-compatible chat completion APIs."""

    def __init__(
        self, model: str = "qwen3", api_key: str | None = None, base_url: str | None = None
    ) -> None:
        super().__init__(model, api_key, base_url)
        self._async_client = None

    def _get_client(self):
        if self._async_client is None:
            kwargs: dict[str, Any] = {}
            if self.api_key:
                kwargs["api_key"] = self.api_key
            if self.base_url:
                kwargs["base_url"] = self.base_url
            self._async_client = AsyncOpenAI(**kwargs)
        return self._async_client

    def _format_messages(self, messages: list[Message]) -> list[dict]:
        return [{"role": msg.role, "content": msg.content} for msg in messages]

    async def complete(
        self,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=self._format_messages(messages),
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            raise CompletionError(f"LLM call to {self.base_url} failed: {e}") from e

        if not response.choices:
            return LLMResponse()
        choice = response.choices[0]
        return LLMResponse(
            content=choice.message.content or "",
            finish_reason=choice.finish_reason or "",
            usage={
                "prompt_tokens": response.usage.prompt_tokens if response.usage else 0,
                "completion_tokens": response.usage.completion_tokens if response.usage else 0,
            },
        )

    async def close(self) -> None:
        if self._async_client is not None:
            await self._async_client.close()
            self._async_client = None
