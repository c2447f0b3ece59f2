"""Server-side search: prompt the provider and interpret its answer."""

from profile_search.config.prompts import (
    SUGGESTION_USER_PROMPT,
    build_search_system_prompt,
    build_suggestion_system_prompt,
)
from profile_search.config.settings import Settings, get_settings
from profile_search.core.exceptions import ProviderError, ProviderUnavailableError
from profile_search.data.context import UserContext
from profile_search.data.search import (
    DEFAULT_SUGGESTED_QUESTIONS,
    AISearchRequest,
    AISearchResponse,
)
from profile_search.parsing import (
    MAX_SUGGESTED_QUESTIONS,
    extract_suggested_questions,
    parse_ai_response,
)
from profile_search.utils.llm import LLMClient
from profile_search.utils.logging import get_logger


logger = get_logger(__name__)


class AISearchService:
    """
    Answers visitor questions about a profile.

    Holds no per-visitor state: each call builds its prompt from the
    request's UserContext. Search failures raise ProviderError so the caller
    decides how to present them; suggested questions always degrade to the
    static defaults instead.
    """

    def __init__(
        self,
        llm_client: LLMClient | None,
        settings: Settings | None = None,
    ):
        """
        Initialize search service.

        Args:
            llm_client: Completion client, or None when no provider is configured
            settings: Settings override (defaults to cached settings)
        """
        self._llm_client = llm_client
        self._settings = settings or get_settings()

    @property
    def is_available(self) -> bool:
        """Whether a completion provider is configured."""
        return self._llm_client is not None

    async def search(self, request: AISearchRequest) -> AISearchResponse:
        """
        Answer one question.

        Raises:
            ProviderUnavailableError: No provider configured
            ProviderError: The completion call failed or timed out
        """
        if self._llm_client is None:
            raise ProviderUnavailableError("No completion provider configured")

        system = build_search_system_prompt(request.username, request.context)

        logger.info(
            "AI search started",
            username=request.username,
            query_length=len(request.query),
        )

        try:
            response = await self._llm_client.complete(
                prompt=request.query,
                system=system,
                max_tokens=self._settings.search_max_tokens,
                temperature=self._settings.search_temperature,
            )
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(
                f"Completion failed: {e}",
                provider=self._llm_client.provider_name,
            ) from e

        content = response.content
        parsed = parse_ai_response(content, request.context)
        suggested_questions = extract_suggested_questions(content)

        logger.info(
            "AI search completed",
            username=request.username,
            content_type=parsed.type.value,
            suggested_questions=len(suggested_questions),
            total_tokens=response.usage.total_tokens,
        )

        return AISearchResponse(
            content=content,
            content_type=parsed.type,
            suggested_questions=suggested_questions,
            metadata={
                "parsed_content": parsed.data.model_dump(mode="json"),
                "usage": response.usage.to_dict(),
                "model": response.model,
            },
            parsed_content=parsed,
        )

    async def generate_suggested_questions(
        self,
        username: str,
        context: UserContext | None = None,
    ) -> list[str]:
        """Four starter questions for the profile; never raises."""
        if self._llm_client is None:
            return list(DEFAULT_SUGGESTED_QUESTIONS)

        system = build_suggestion_system_prompt(username, context)

        try:
            response = await self._llm_client.complete(
                prompt=SUGGESTION_USER_PROMPT,
                system=system,
                max_tokens=self._settings.suggestion_max_tokens,
                temperature=self._settings.suggestion_temperature,
            )
        except Exception as e:
            logger.warning(
                "Failed to generate suggested questions, using defaults",
                username=username,
                error=str(e),
            )
            return list(DEFAULT_SUGGESTED_QUESTIONS)

        questions = [line.strip() for line in response.content.split("\n")]
        questions = [q for q in questions if q][:MAX_SUGGESTED_QUESTIONS]

        return questions or list(DEFAULT_SUGGESTED_QUESTIONS)
