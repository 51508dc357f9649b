"""Configuration management for Renovate AI.

Configuration is resolved once at process start by :func:`resolve_config` and
is immutable afterwards. The resolver never touches ``os.environ``; the CLI
hands it a mapping of environment variables so the precedence rules stay a
pure function of their inputs.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from renovate_ai.exceptions import ConfigError

PROVIDER_VLLM = "vllm"
PROVIDER_LITELLM = "litellm"
SUPPORTED_PROVIDERS = (PROVIDER_VLLM, PROVIDER_LITELLM)

DEFAULT_PROVIDER = PROVIDER_VLLM
DEFAULT_MODEL = "qwen3"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
# The OpenAI client refuses to start without a key; self-hosted servers ignore it.
PLACEHOLDER_API_KEY = "not-needed"

PROVIDER_DEFAULT_URLS = {
    PROVIDER_VLLM: "http://localhost:8000/v1",
    PROVIDER_LITELLM: "http://localhost:4000/v1",
}

# Environment variables, most preferred first.
PROVIDER_ENV = ("LLM_PROVIDER",)
BASE_URL_ENV = ("LLM_API_URL", "VLLM_API_URL")
API_KEY_ENV = ("LLM_API_KEY", "VLLM_API_KEY", "OPENAI_API_KEY")
MODEL_ENV = ("LLM_MODEL",)
GITHUB_TOKEN_ENV = ("GITHUB_TOKEN",)
REPOSITORY_ENV = ("GITHUB_REPOSITORY",)


class RepoRef(BaseModel):
    """An ``owner/name`` repository identifier."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class LLMConfig(BaseModel):
    """Completion service configuration."""

    model_config = ConfigDict(frozen=True)

    provider: str = DEFAULT_PROVIDER
    base_url: str = PROVIDER_DEFAULT_URLS[DEFAULT_PROVIDER]
    api_key: str = PLACEHOLDER_API_KEY
    model: str = DEFAULT_MODEL


class AnalyzerConfig(BaseModel):
    """Full configuration for a single analysis run."""

    model_config = ConfigDict(frozen=True)

    repo: RepoRef
    pr_number: int = Field(gt=0)
    github_token: str
    github_api_url: str = DEFAULT_GITHUB_API_URL
    llm: LLMConfig = Field(default_factory=LLMConfig)


def parse_repo(value: str) -> RepoRef:
    """Split ``owner/repo`` into a :class:`RepoRef`.

    Raises:
        ConfigError: Unless the value has exactly two non-empty segments.
    """
    parts = value.split("/")
    if len(parts) != 2 or not all(parts):
        raise ConfigError(f"invalid repo format: {value} (expected owner/repo)")
    return RepoRef(owner=parts[0], name=parts[1])


def normalize_base_url(url: str) -> str:
    """Turn a completion endpoint URL into an OpenAI-style ``/v1`` base URL."""
    url = _trim_suffix(url, "/chat/completions")
    url = _trim_suffix(url, "/v1/chat/completions")
    if not url.endswith("/v1"):
        if url.endswith("/"):
            url = url + "v1"
        else:
            url = url + "/v1"
    return url


def _trim_suffix(value: str, suffix: str) -> str:
    if value.endswith(suffix):
        return value[: -len(suffix)]
    return value


def _first_set(
    explicit: str | None, environ: Mapping[str, str], names: tuple[str, ...]
) -> str | None:
    """Return the explicit value, else the first non-empty environment variable."""
    if explicit:
        return explicit
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def resolve_provider(explicit: str | None, environ: Mapping[str, str]) -> str:
    raw = _first_set(explicit, environ, PROVIDER_ENV) or DEFAULT_PROVIDER
    provider = raw.lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigError(
            f"Invalid LLM provider '{raw}'. "
            f"Must be one of: {', '.join(SUPPORTED_PROVIDERS)}"
        )
    return provider


def resolve_llm_config(
    provider: str | None = None,
    base_url: str | None = None,
    api_key: str | None = None,
    model: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> LLMConfig:
    """Resolve the completion service settings.

    Each field is taken from the explicit value, then the primary environment
    variable, then any legacy variable, then the provider default.
    """
    environ = environ or {}
    resolved_provider = resolve_provider(provider, environ)
    url = _first_set(base_url, environ, BASE_URL_ENV) or PROVIDER_DEFAULT_URLS[resolved_provider]
    return LLMConfig(
        provider=resolved_provider,
        base_url=normalize_base_url(url),
        api_key=_first_set(api_key, environ, API_KEY_ENV) or PLACEHOLDER_API_KEY,
        model=_first_set(model, environ, MODEL_ENV) or DEFAULT_MODEL,
    )


def resolve_config(
    repo: str | None,
    pr_number: int | None,
    github_token: str | None = None,
    llm_provider: str | None = None,
    llm_url: str | None = None,
    llm_key: str | None = None,
    model: str | None = None,
    github_api_url: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> AnalyzerConfig:
    """Build the immutable run configuration.

    Raises:
        ConfigError: On a malformed repository, a missing token or PR number,
            or an unrecognized provider.
    """
    environ = environ or {}

    repo_value = _first_set(repo, environ, REPOSITORY_ENV)
    if not repo_value:
        raise ConfigError("--repo is required (or set GITHUB_REPOSITORY)")
    repo_ref = parse_repo(repo_value)

    if not pr_number or pr_number <= 0:
        raise ConfigError("--pr-number must be a positive integer")

    token = _first_set(github_token, environ, GITHUB_TOKEN_ENV)
    if not token:
        raise ConfigError("--github-token is required (or set GITHUB_TOKEN)")

    llm = resolve_llm_config(
        provider=llm_provider,
        base_url=llm_url,
        api_key=llm_key,
        model=model,
        environ=environ,
    )

    return AnalyzerConfig(
        repo=repo_ref,
        pr_number=pr_number,
        github_token=token,
        github_api_url=(github_api_url or DEFAULT_GITHUB_API_URL).rstrip("/"),
        llm=llm,
    )
