"""Factory for creating LLM providers from configuration."""

from __future__ import annotations

from renovate_ai.config import SUPPORTED_PROVIDERS, LLMConfig
from renovate_ai.exceptions import ConfigError
from renovate_ai.llm.base import LLMProvider


def create_provider(config: LLMConfig) -> LLMProvider:
    """Create an LLM provider from configuration.

    vLLM and the LiteLLM proxy both speak the OpenAI chat completions API, so
    both are served by :class:`OpenAIProvider`; only their defaults differ.

    Raises:
        ConfigError: If the provider is unknown.
    """
    provider = config.provider.lower()

    if provider in SUPPORTED_PROVIDERS:
        from renovate_ai.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(
            model=config.model,
            api_key=config.api_key,
            base_url=config.base_url,
        )
    raise ConfigError(
        f"Unknown LLM provider: '{provider}'. "
        f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
    )
