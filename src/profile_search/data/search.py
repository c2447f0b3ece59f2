"""Search request, response, and UI state models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from profile_search.data.content import ContentType, GenerativeContent
from profile_search.data.context import UserContext


DEFAULT_SUGGESTED_QUESTIONS: tuple[str, ...] = (
    "Tell me about yourself",
    "How can I contact you?",
    "What services do you offer?",
    "Show me your latest work",
)


class AISearchRequest(BaseModel):
    """A visitor's question about a profile."""

    query: str = Field(min_length=1, description="Visitor question")
    username: str = Field(description="Profile username")
    context: UserContext | None = Field(
        default=None, description="Profile snapshot used for prompting"
    )


class AISearchResponse(BaseModel):
    """Raw completion plus what the server derived from it."""

    content: str
    content_type: ContentType
    suggested_questions: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    parsed_content: GenerativeContent | None = Field(
        default=None,
        exclude=True,
        description="Content built from the completion, for in-process callers",
    )


class SearchStatus(str, Enum):
    """Derived state of the search UI."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SearchState(BaseModel):
    """
    Single source of truth for the search UI.

    Owned by SearchOrchestrator; every transition produces a new instance.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    is_loading: bool = False
    response: GenerativeContent | None = None
    error: str | None = None
    error_code: str | None = None
    suggested_questions: list[str] = Field(default_factory=list)

    @property
    def status(self) -> SearchStatus:
        if self.is_loading:
            return SearchStatus.LOADING
        if self.error is not None:
            return SearchStatus.ERROR
        if self.response is not None:
            return SearchStatus.SUCCESS
        return SearchStatus.IDLE
