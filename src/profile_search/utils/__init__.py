"""Utility modules."""

from profile_search.utils.logging import get_logger, configure_logging
from profile_search.utils.llm import LLMClient, LLMResponse
from profile_search.utils.social import (
    SocialPlatform,
    detect_social_platform,
    separate_social_links,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "LLMClient",
    "LLMResponse",
    "SocialPlatform",
    "detect_social_platform",
    "separate_social_links",
]
