"""LLM provider implementations.

Supports multiple LLM providers with a unified interface:
- OpenAI: chat completions (default)
- Anthropic: Claude messages API

Usage:
    from profile_search.utils.providers import create_provider

    # Create provider based on settings
    provider = create_provider()

    # Or explicitly create a specific provider
    provider = create_provider("anthropic", api_key="...")
"""

from profile_search.core.exceptions import ProviderUnavailableError
from profile_search.utils.providers.base import BaseLLMProvider, LLMResponse, TokenUsage
from profile_search.utils.providers.anthropic import AnthropicProvider
from profile_search.utils.providers.openai import OpenAIProvider


def create_provider(
    provider: str | None = None,
    **kwargs,
) -> BaseLLMProvider:
    """
    Factory function to create LLM provider based on configuration.

    Args:
        provider: Provider name ("openai" or "anthropic"). If None, uses settings.
        **kwargs: Provider-specific arguments (api_key)

    Returns:
        Configured LLM provider instance

    Raises:
        ProviderUnavailableError: If the provider is unknown or has no credential
    """
    from profile_search.config.settings import get_settings

    settings = get_settings()

    provider_name = provider or settings.llm_provider

    if provider_name == "openai":
        api_key = kwargs.get("api_key") or settings.openai_api_key
        if not api_key:
            raise ProviderUnavailableError(
                "OpenAI API key required. Set OPENAI_API_KEY environment variable.",
                provider="openai",
            )
        return OpenAIProvider(api_key=api_key)

    elif provider_name == "anthropic":
        api_key = kwargs.get("api_key") or settings.anthropic_api_key
        if not api_key:
            raise ProviderUnavailableError(
                "Anthropic API key required. Set ANTHROPIC_API_KEY environment variable.",
                provider="anthropic",
            )
        return AnthropicProvider(api_key=api_key)

    else:
        raise ProviderUnavailableError(
            f"Unknown LLM provider: {provider_name}. "
            f"Supported providers: openai, anthropic",
            provider=provider_name,
        )


__all__ = [
    "BaseLLMProvider",
    "LLMResponse",
    "TokenUsage",
    "AnthropicProvider",
    "OpenAIProvider",
    "create_provider",
]
