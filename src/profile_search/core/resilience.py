"""Resilience patterns for completion provider calls using hyx.

Provides:
- Circuit breaker to stop hammering a failing provider
- Timeout bounded by ``provider_timeout_seconds``
- Translation of SDK exceptions into resilience-aware exceptions

Searches are never retried automatically; the UI re-issues a search instead.

Usage:
    from profile_search.core.resilience import (
        llm_circuit_breaker,
        llm_timeout,
        wrap_openai_errors,
    )

    @llm_circuit_breaker
    @llm_timeout
    @wrap_openai_errors
    async def complete(...):
        ...
"""

import asyncio
from functools import wraps
from typing import Any, Callable, TypeVar

import anthropic
import openai
from hyx.circuitbreaker.api import consecutive_breaker
from hyx.circuitbreaker.exceptions import BreakerFailing

from profile_search.config.settings import get_settings
from profile_search.core.exceptions import ProviderError, ProviderTimeoutError

# Alias for clarity
BreakerOpen = BreakerFailing

__all__ = [
    # Exceptions
    "BreakerOpen",
    "TransientError",
    "RateLimitError",
    # LLM patterns
    "llm_circuit_breaker",
    "llm_timeout",
    "wrap_anthropic_errors",
    "wrap_openai_errors",
    # Configuration
    "ResilienceConfig",
]


# =============================================================================
# CUSTOM EXCEPTIONS
# =============================================================================


class TransientError(ProviderError):
    """Error that is likely to succeed later (network issues, overload)."""
    pass


class RateLimitError(ProviderError):
    """Error indicating rate limiting (HTTP 429, throttling)."""
    pass


# =============================================================================
# CONFIGURATION
# =============================================================================


class ResilienceConfig:
    """Centralized configuration for resilience patterns."""

    LLM_CIRCUIT_FAILURE_THRESHOLD: int = 3
    LLM_CIRCUIT_RECOVERY_TIME: float = 60.0  # seconds
    LLM_CIRCUIT_RECOVERY_THRESHOLD: int = 1


# =============================================================================
# LLM RESILIENCE PATTERNS
# =============================================================================


# Circuit breaker for LLM providers
llm_circuit_breaker = consecutive_breaker(
    exceptions=(TransientError, RateLimitError, ProviderTimeoutError),
    failure_threshold=ResilienceConfig.LLM_CIRCUIT_FAILURE_THRESHOLD,
    recovery_time_secs=ResilienceConfig.LLM_CIRCUIT_RECOVERY_TIME,
    recovery_threshold=ResilienceConfig.LLM_CIRCUIT_RECOVERY_THRESHOLD,
)

# Type variable for generic functions
F = TypeVar("F", bound=Callable[..., Any])


def llm_timeout(func: F) -> F:
    """
    Apply the provider timeout budget to an LLM operation.

    The budget is read from settings at call time so tests and
    deployments can tune it without re-importing the module.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        timeout_seconds = get_settings().provider_timeout_seconds
        try:
            return await asyncio.wait_for(
                func(*args, **kwargs),
                timeout=timeout_seconds,
            )
        except asyncio.TimeoutError:
            raise ProviderTimeoutError(
                f"Provider call timed out after {timeout_seconds}s",
                timeout_seconds=timeout_seconds,
            )

    return wrapper  # type: ignore


# =============================================================================
# HELPER DECORATORS
# =============================================================================


def wrap_anthropic_errors(func: F) -> F:
    """
    Decorator to convert Anthropic API exceptions to resilience-aware exceptions.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except anthropic.RateLimitError as e:
            raise RateLimitError(f"Anthropic rate limit: {e}", provider="anthropic") from e
        except anthropic.APIConnectionError as e:
            raise TransientError(f"Anthropic connection error: {e}", provider="anthropic") from e
        except anthropic.InternalServerError as e:
            raise TransientError(f"Anthropic server error: {e}", provider="anthropic") from e
        except anthropic.APIStatusError as e:
            if e.status_code == 529:  # Overloaded
                raise TransientError(f"Anthropic overloaded: {e}", provider="anthropic") from e
            raise ProviderError(
                f"Anthropic request failed (HTTP {e.status_code})",
                provider="anthropic",
                recoverable=False,
            ) from e

    return wrapper  # type: ignore


def wrap_openai_errors(func: F) -> F:
    """
    Decorator to convert OpenAI API exceptions to resilience-aware exceptions.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except openai.RateLimitError as e:
            raise RateLimitError(f"OpenAI rate limit: {e}", provider="openai") from e
        except openai.APIConnectionError as e:
            # APITimeoutError is a subclass
            raise TransientError(f"OpenAI connection error: {e}", provider="openai") from e
        except openai.InternalServerError as e:
            raise TransientError(f"OpenAI server error: {e}", provider="openai") from e
        except openai.APIStatusError as e:
            raise ProviderError(
                f"OpenAI request failed (HTTP {e.status_code})",
                provider="openai",
                recoverable=False,
            ) from e

    return wrapper  # type: ignore
