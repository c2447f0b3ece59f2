"""Profile search service and client-side orchestration."""

from profile_search.search.service import AISearchService
from profile_search.search.orchestrator import (
    SEARCH_ERROR_MESSAGE,
    SEARCH_TIMEOUT_MESSAGE,
    SearchOrchestrator,
)

__all__ = [
    "AISearchService",
    "SearchOrchestrator",
    "SEARCH_ERROR_MESSAGE",
    "SEARCH_TIMEOUT_MESSAGE",
]
