"""API module."""

from .routes import router
from .models import HealthResponse, SuggestedQuestionsRequest, SuggestedQuestionsResponse

__all__ = [
    "router",
    "HealthResponse",
    "SuggestedQuestionsRequest",
    "SuggestedQuestionsResponse",
]
