"""Core domain modules."""

from profile_search.core.exceptions import (
    ProfileSearchError,
    ProviderError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)

__all__ = [
    # Exceptions
    "ProfileSearchError",
    "ProviderError",
    "ProviderTimeoutError",
    "ProviderUnavailableError",
]
