"""OpenAI chat completions provider.

Resilience patterns applied:
- Circuit breaker to prevent cascade failures to an overloaded API
- Timeout to bound operation duration
"""

from typing import Any

from openai import AsyncOpenAI

from profile_search.core.resilience import (
    llm_circuit_breaker,
    llm_timeout,
    wrap_openai_errors,
)
from profile_search.utils.logging import get_logger
from profile_search.utils.providers.base import BaseLLMProvider, LLMResponse, TokenUsage


logger = get_logger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """
    Direct OpenAI API provider.

    Sends a system message plus a single user message and returns the
    first choice's text.
    """

    DEFAULT_MODEL = "gpt-4o-mini"

    MODEL_ALIASES = {
        "mini": "gpt-4o-mini",
        "4o": "gpt-4o",
    }

    def __init__(self, api_key: str):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
        """
        self._client = AsyncOpenAI(api_key=api_key)

    @property
    def provider_name(self) -> str:
        return "openai"

    @llm_circuit_breaker
    @llm_timeout
    @wrap_openai_errors
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
            "Calling OpenAI API",
            model=resolved_model,
            prompt_length=len(prompt),
            system_length=len(system),
        )

        messages: list[dict[str, Any]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        response = await self._client.chat.completions.create(
            model=resolved_model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )

        content = ""
        stop_reason = None
        if response.choices:
            choice = response.choices[0]
            content = choice.message.content or ""
            stop_reason = choice.finish_reason

        usage = TokenUsage()
        if response.usage is not None:
            usage = TokenUsage(
                input_tokens=response.usage.prompt_tokens or 0,
                output_tokens=response.usage.completion_tokens or 0,
            )

        logger.debug(
            "OpenAI response received",
            model=resolved_model,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            stop_reason=stop_reason,
        )

        return LLMResponse(
            content=content,
            model=response.model or resolved_model,
            usage=usage,
            stop_reason=stop_reason,
            provider=self.provider_name,
        )

    async def close(self) -> None:
        await self._client.close()
