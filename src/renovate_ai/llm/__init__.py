"""LLM provider abstraction layer."""

from renovate_ai.llm.base import LLMProvider, LLMResponse, Message
from renovate_ai.llm.factory import create_provider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "Message",
    "create_provider",
]
