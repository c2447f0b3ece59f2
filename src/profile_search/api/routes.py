"""FastAPI routes for the profile search API."""

from fastapi import APIRouter

from profile_search import __version__
from profile_search.api.dependencies import SearchServiceDep
from profile_search.api.models import (
    HealthResponse,
    SuggestedQuestionsRequest,
    SuggestedQuestionsResponse,
)
from profile_search.core.exceptions import (
    ProviderError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from profile_search.data.content import ContentType
from profile_search.data.search import (
    DEFAULT_SUGGESTED_QUESTIONS,
    AISearchRequest,
    AISearchResponse,
)
from profile_search.utils.logging import get_logger


logger = get_logger(__name__)
router = APIRouter()

SEARCH_FALLBACK_MESSAGE = (
    "I apologize, but I encountered an issue processing your request. "
    "Please try again or rephrase your question."
)

# The fallback offers fewer questions than the idle state
SEARCH_FALLBACK_QUESTIONS = DEFAULT_SUGGESTED_QUESTIONS[:3]


def _error_code(error: ProviderError) -> str:
    if isinstance(error, ProviderUnavailableError):
        return "provider_unavailable"
    if isinstance(error, ProviderTimeoutError):
        return "timeout"
    return "provider_error"


@router.get("/health", response_model=HealthResponse)
async def health_check(service: SearchServiceDep) -> HealthResponse:
    """
    Health check endpoint.

    Returns application status, version and whether a completion
    provider is configured.
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        provider_available=service.is_available,
    )


@router.post("/search", response_model=AISearchResponse)
async def search(
    search_request: AISearchRequest,
    service: SearchServiceDep,
) -> AISearchResponse:
    """
    Answer a visitor question about a profile.

    Provider failures produce a friendly text answer instead of an HTTP
    error; `metadata.error` carries a short error code.
    """
    try:
        return await service.search(search_request)
    except ProviderError as e:
        logger.error(
            "AI search failed",
            username=search_request.username,
            provider=e.provider,
            error=str(e),
        )
        return AISearchResponse(
            content=SEARCH_FALLBACK_MESSAGE,
            content_type=ContentType.TEXT,
            suggested_questions=list(SEARCH_FALLBACK_QUESTIONS),
            metadata={"error": _error_code(e)},
        )


@router.post("/suggested-questions", response_model=SuggestedQuestionsResponse)
async def suggested_questions(
    questions_request: SuggestedQuestionsRequest,
    service: SearchServiceDep,
) -> SuggestedQuestionsResponse:
    """Starter questions for a profile. Falls back to defaults on failure."""
    questions = await service.generate_suggested_questions(
        questions_request.username,
        questions_request.context,
    )
    return SuggestedQuestionsResponse(questions=questions)
