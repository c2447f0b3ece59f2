"""Base interface for LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class TokenUsage:
    """Token counts reported by a provider for one completion."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    def to_dict(self) -> dict[str, int]:
        return {
            "input_tokens": self.input_tokens,
            "output_tokens": self.output_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass
class LLMResponse:
    """Unified response from any LLM provider."""

    content: str
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    stop_reason: str | None = None
    provider: str = "unknown"


class BaseLLMProvider(ABC):
    """
    Abstract base class for LLM providers.

    All providers (OpenAI, Anthropic, test fakes) implement this interface
    so the search service can treat the completion call as opaque.
    """

    # Model used when neither the caller nor settings pick one
    DEFAULT_MODEL: str = ""

    # Model aliases mapping - override in subclasses
    MODEL_ALIASES: dict[str, str] = {}

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name (e.g., 'openai', 'anthropic')."""
        ...

    def resolve_model(self, model: str | None) -> str:
        """Resolve model alias to full model ID."""
        if not model:
            return self.DEFAULT_MODEL
        return self.MODEL_ALIASES.get(model, model)

    @abstractmethod
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
            model: Model name or alias (provider default when omitted)
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature

        Returns:
            LLMResponse with content and metadata
        """
        ...

    async def close(self) -> None:
        """Release any underlying HTTP resources."""
        return None
