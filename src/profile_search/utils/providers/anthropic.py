"""Anthropic direct API provider.

Resilience patterns applied:
- Circuit breaker to prevent cascade failures to an overloaded API
- Timeout to bound operation duration
"""

from typing import Any

from anthropic import AsyncAnthropic

from profile_search.core.resilience import (
    llm_circuit_breaker,
    llm_timeout,
    wrap_anthropic_errors,
)
from profile_search.utils.logging import get_logger
from profile_search.utils.providers.base import BaseLLMProvider, LLMResponse, TokenUsage


logger = get_logger(__name__)


class AnthropicProvider(BaseLLMProvider):
    """
    Direct Anthropic API provider.

    Uses the official Anthropic Python SDK to call Claude models directly.
    """

    DEFAULT_MODEL = "claude-3-5-haiku-20241022"

    MODEL_ALIASES = {
        "haiku": "claude-3-5-haiku-20241022",
        "sonnet": "claude-3-5-sonnet-20241022",
    }

    def __init__(self, api_key: str):
        """
        Initialize Anthropic provider.

        Args:
            api_key: Anthropic API key
        """
        self._client = AsyncAnthropic(api_key=api_key)

    @property
    def provider_name(self) -> str:
        return "anthropic"

    @llm_circuit_breaker
    @llm_timeout
    @wrap_anthropic_errors
    async def complete(
        self,
        prompt: str,
        system: str = "",
        model: str | None = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ) -> LLMResponse:
        resolved_model = self.resolve_model(model)

        logger.debug(
            "Calling Anthropic API",
            model=resolved_model,
            prompt_length=len(prompt),
            system_length=len(system),
        )

        api_params: dict[str, Any] = {
            "model": resolved_model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            api_params["system"] = system

        response = await self._client.messages.create(**api_params)

        content = "".join(
            block.text for block in response.content if block.type == "text"
        )

        usage = TokenUsage(
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )

        logger.debug(
            "Anthropic response received",
            model=resolved_model,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            stop_reason=response.stop_reason,
        )

        return LLMResponse(
            content=content,
            model=resolved_model,
            usage=usage,
            stop_reason=response.stop_reason,
            provider=self.provider_name,
        )

    async def close(self) -> None:
        await self._client.close()
