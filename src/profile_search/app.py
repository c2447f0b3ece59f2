"""Application class with startup/shutdown lifecycle."""

from profile_search.config.settings import get_settings
from profile_search.core.exceptions import ProviderUnavailableError
from profile_search.search.service import AISearchService
from profile_search.utils.llm import LLMClient
from profile_search.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)


class Application:
    """
    Owns the long-lived resources of the API process.

    Handles:
    - Creating the completion client from settings
    - Running without a provider when no credential is configured
    - Closing the client on shutdown
    """

    def __init__(self):
        """Initialize application."""
        self.llm_client: LLMClient | None = None
        self.search_service: AISearchService | None = None

    async def startup(self) -> None:
        """Initialize resources on startup."""
        settings = get_settings()

        configure_logging(settings.log_level, settings.log_format)

        logger.info("Starting application...")

        try:
            self.llm_client = LLMClient()
            logger.info(
                "Completion provider initialized",
                provider=self.llm_client.provider_name,
            )
        except ProviderUnavailableError as e:
            # Search answers with the fallback text until a key is configured
            logger.warning("Completion provider unavailable", error=str(e))
            self.llm_client = None

        self.search_service = AISearchService(self.llm_client, settings=settings)

        logger.info("Application started")

    async def shutdown(self) -> None:
        """Release the completion client."""
        logger.info("Shutdown initiated...")

        if self.llm_client is not None:
            await self.llm_client.close()
            self.llm_client = None

        logger.info("Shutdown complete")


# Global application instance
app_instance = Application()
