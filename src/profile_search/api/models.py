"""API request/response models."""

from pydantic import BaseModel, Field

from profile_search.data.context import UserContext


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str
    provider_available: bool = False


class SuggestedQuestionsRequest(BaseModel):
    """Request model for the suggested questions endpoint."""

    username: str = Field(description="Profile username")
    context: UserContext | None = Field(
        default=None, description="Profile snapshot used for prompting"
    )


class SuggestedQuestionsResponse(BaseModel):
    """Response model for the suggested questions endpoint."""

    questions: list[str]
