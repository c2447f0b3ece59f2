"""Data models for content, profile context, and search state."""

from profile_search.data.content import (
    ContentType,
    GenerativeContent,
    GENERATIVE_CONTENT_ADAPTER,
    TextContent,
    CardsContent,
    CarouselContent,
    AccordionContent,
    TabsContent,
    ContactContent,
)
from profile_search.data.context import (
    ProfileInfo,
    ProfileLink,
    ContextLink,
    SocialLink,
    UserContext,
)
from profile_search.data.search import (
    DEFAULT_SUGGESTED_QUESTIONS,
    AISearchRequest,
    AISearchResponse,
    SearchState,
    SearchStatus,
)

__all__ = [
    # Content
    "ContentType",
    "GenerativeContent",
    "GENERATIVE_CONTENT_ADAPTER",
    "TextContent",
    "CardsContent",
    "CarouselContent",
    "AccordionContent",
    "TabsContent",
    "ContactContent",
    # Context
    "ProfileInfo",
    "ProfileLink",
    "ContextLink",
    "SocialLink",
    "UserContext",
    # Search
    "DEFAULT_SUGGESTED_QUESTIONS",
    "AISearchRequest",
    "AISearchResponse",
    "SearchState",
    "SearchStatus",
]
