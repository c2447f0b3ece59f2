"""FastAPI dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from profile_search.config.settings import Settings, get_settings
from profile_search.search.service import AISearchService


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


async def get_search_service(request: Request) -> AISearchService:
    """
    Get the search service from application state.

    Without a started application (or without a configured provider) the
    service is still returned; it reports itself unavailable.
    """
    service = getattr(request.app.state, "search_service", None)
    if service is None:
        service = AISearchService(llm_client=None)
        request.app.state.search_service = service
    return service


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
SearchServiceDep = Annotated[AISearchService, Depends(get_search_service)]
