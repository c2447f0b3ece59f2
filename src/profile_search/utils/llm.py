"""Async LLM client wrapper with multi-provider support.

Supports:
- OpenAI chat completions (default)
- Anthropic messages API

The provider is selected based on the LLM_PROVIDER environment variable,
or injected directly (tests pass a fake BaseLLMProvider).
"""

from profile_search.config.settings import get_settings
from profile_search.utils.logging import get_logger
from profile_search.utils.providers import (
    BaseLLMProvider,
    LLMResponse,
    create_provider,
)


logger = get_logger(__name__)


__all__ = ["LLMClient", "LLMResponse"]


class LLMClient:
    """
    Async LLM client with multi-provider support.

    Example:
        # Use default provider from settings
        client = LLMClient()

        # Explicit Anthropic
        client = LLMClient(provider="anthropic", api_key="sk-...")

        # Pre-built provider instance
        client = LLMClient(provider=FakeProvider())
    """

    def __init__(
        self,
        provider: str | BaseLLMProvider | None = None,
        **provider_kwargs,
    ):
        """
        Initialize LLM client.

        Args:
            provider: Provider name, provider instance, or None to use settings.
            **provider_kwargs: Provider-specific arguments (api_key)

        Raises:
            ProviderUnavailableError: If the provider cannot be configured
        """
        settings = get_settings()
        if isinstance(provider, BaseLLMProvider):
            self._provider = provider
        else:
            self._provider = create_provider(provider, **provider_kwargs)
        self._default_model = settings.default_model

        logger.info(
            "LLM client initialized",
            provider=self._provider.provider_name,
        )

    @property
    def provider_name(self) -> str:
        """Get the name of the current provider."""
        return self._provider.provider_name

    async def complete(
        self,
        prompt: str,
        system: str = "",
        model: str | None = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """
        Call LLM and get complete response.

        Args:
            prompt: User prompt
            system: System prompt
            model: Model name or alias; falls back to settings, then provider default
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature

        Returns:
            LLMResponse with content and metadata
        """
        return await self._provider.complete(
            prompt=prompt,
            system=system,
            model=model or self._default_model,
            max_tokens=max_tokens,
            temperature=temperature,
        )

    async def close(self) -> None:
        """Close the underlying provider."""
        await self._provider.close()
