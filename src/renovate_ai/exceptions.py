"""Custom exceptions for Renovate AI."""


class RenovateAIError(Exception):
    """Base exception for all Renovate AI errors."""


class ConfigError(RenovateAIError):
    """Configuration-related errors."""


class FetchError(RenovateAIError):
    """Pull request metadata or file list could not be fetched."""


class LLMError(RenovateAIError):
    """LLM provider errors."""


class CompletionError(LLMError):
    """The completion call failed or returned no content."""


class PublishError(RenovateAIError):
    """The analysis comment could not be posted."""

