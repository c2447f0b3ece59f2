"""Search state machine driving the ask-anything UI.

States: idle -> loading -> (success | error) -> idle (via clear).

Each search takes a sequence number. When two searches overlap, only the one
issued last may write its result; earlier completions are discarded. clear()
advances the sequence too, so a reset is never overwritten by a late answer.

Usage:
    orchestrator = SearchOrchestrator(service, "jane", user_context)
    orchestrator.subscribe(render)

    await orchestrator.load_initial_questions()
    await orchestrator.search("What do you do?")
    orchestrator.state.response  # GenerativeContent
"""

import asyncio
from typing import Any, Callable

from profile_search.config.settings import get_settings
from profile_search.core.exceptions import ProviderTimeoutError
from profile_search.data.context import UserContext
from profile_search.data.search import (
    DEFAULT_SUGGESTED_QUESTIONS,
    AISearchRequest,
    SearchState,
)
from profile_search.events.emitter import EventEmitter
from profile_search.events.models import Event, StateChangedEvent
from profile_search.events.types import EventType
from profile_search.parsing import parse_ai_response
from profile_search.search.service import AISearchService
from profile_search.utils.logging import get_logger


logger = get_logger(__name__)


SEARCH_ERROR_MESSAGE = "Failed to process your question. Please try again."
SEARCH_TIMEOUT_MESSAGE = "This is taking longer than expected. Please try again."

ERROR_CODE_PROVIDER = "provider_error"
ERROR_CODE_TIMEOUT = "timeout"


class SearchOrchestrator:
    """
    Owns SearchState for one profile page.

    The state is read-only to callers; subscribers receive a
    StateChangedEvent after every transition.
    """

    def __init__(
        self,
        service: AISearchService,
        username: str,
        user_context: UserContext | None = None,
        *,
        timeout_seconds: float | None = None,
        emitter: EventEmitter | None = None,
    ):
        """
        Initialize orchestrator.

        Args:
            service: Search service used for both provider calls
            username: Profile username
            user_context: Profile snapshot passed to every search
            timeout_seconds: Budget per provider call (defaults to settings)
            emitter: Event emitter for state observers
        """
        self._service = service
        self._username = username
        self._user_context = user_context
        self._timeout_seconds = (
            timeout_seconds
            if timeout_seconds is not None
            else get_settings().provider_timeout_seconds
        )
        self._emitter = emitter or EventEmitter()

        self._initial_questions: list[str] = list(DEFAULT_SUGGESTED_QUESTIONS)
        self._initial_questions_loaded = False
        self._sequence = 0
        self._state = SearchState(suggested_questions=list(self._initial_questions))

    @property
    def state(self) -> SearchState:
        """Current search state."""
        return self._state

    @property
    def initial_questions(self) -> list[str]:
        """Questions shown before any search and after errors or clear()."""
        return list(self._initial_questions)

    @property
    def initial_questions_loaded(self) -> bool:
        return self._initial_questions_loaded

    def subscribe(self, handler: Callable[[Event], Any], pattern: str = "*") -> str:
        """Observe state transitions. Returns a subscription ID."""
        return self._emitter.subscribe(pattern, handler)

    def unsubscribe(self, subscription_id: str) -> bool:
        return self._emitter.unsubscribe(subscription_id)

    async def load_initial_questions(self) -> list[str]:
        """Load starter questions once; falls back to the defaults."""
        try:
            questions = await asyncio.wait_for(
                self._service.generate_suggested_questions(
                    self._username, self._user_context
                ),
                timeout=self._timeout_seconds,
            )
        except Exception as e:
            logger.warning(
                "Failed to load initial questions, using defaults",
                username=self._username,
                error=str(e) or type(e).__name__,
            )
            questions = []

        self._initial_questions = list(questions) or list(DEFAULT_SUGGESTED_QUESTIONS)
        self._initial_questions_loaded = True

        # Only the resting state shows the starter list directly
        if self._state.response is None and not self._state.is_loading:
            self._state = self._state.model_copy(
                update={"suggested_questions": list(self._initial_questions)}
            )
        await self._publish(EventType.SUGGESTIONS_LOADED)

        return self.initial_questions

    async def search(self, query: str) -> SearchState:
        """
        Run one search and return the resulting state.

        The query is trimmed; a blank query leaves the state untouched.
        Provider failures and timeouts end in the error state; no exception
        escapes to the caller.
        """
        query = query.strip()
        if not query:
            return self._state

        self._sequence += 1
        sequence = self._sequence

        self._state = self._state.model_copy(
            update={
                "query": query,
                "is_loading": True,
                "response": None,
                "error": None,
                "error_code": None,
            }
        )
        await self._publish(EventType.SEARCH_STARTED, sequence)

        request = AISearchRequest(
            query=query,
            username=self._username,
            context=self._user_context,
        )

        try:
            result = await asyncio.wait_for(
                self._service.search(request),
                timeout=self._timeout_seconds,
            )
            response = result.parsed_content or parse_ai_response(
                result.content, self._user_context
            )
        except (asyncio.TimeoutError, ProviderTimeoutError):
            if self._is_stale(sequence):
                return self._state
            logger.warning(
                "AI search timed out",
                username=self._username,
                timeout_seconds=self._timeout_seconds,
            )
            self._fail(SEARCH_TIMEOUT_MESSAGE, ERROR_CODE_TIMEOUT)
            await self._publish(EventType.SEARCH_FAILED, sequence)
            return self._state
        except Exception as e:
            if self._is_stale(sequence):
                return self._state
            logger.error(
                "AI search failed",
                username=self._username,
                error=str(e) or type(e).__name__,
            )
            self._fail(SEARCH_ERROR_MESSAGE, ERROR_CODE_PROVIDER)
            await self._publish(EventType.SEARCH_FAILED, sequence)
            return self._state

        if self._is_stale(sequence):
            return self._state

        self._state = self._state.model_copy(
            update={
                "is_loading": False,
                "response": response,
                "error": None,
                "error_code": None,
                "suggested_questions": (
                    list(result.suggested_questions) or list(self._initial_questions)
                ),
            }
        )
        await self._publish(EventType.SEARCH_COMPLETED, sequence)
        return self._state

    async def select_suggested_question(self, question: str) -> SearchState:
        """Search for a suggested question."""
        return await self.search(question)

    async def retry(self) -> SearchState:
        """Repeat the last search with the same query."""
        if not self._state.query:
            return self._state
        return await self.search(self._state.query)

    def clear(self) -> SearchState:
        """Return to the idle state with the initial questions."""
        # Invalidate anything still in flight
        self._sequence += 1

        self._state = SearchState(suggested_questions=list(self._initial_questions))
        self._emitter.emit(StateChangedEvent.create(EventType.SEARCH_CLEARED, self._state))
        return self._state

    def _is_stale(self, sequence: int) -> bool:
        if sequence == self._sequence:
            return False
        logger.debug(
            "Discarding superseded search result",
            sequence=sequence,
            latest=self._sequence,
        )
        self._emitter.emit(
            StateChangedEvent.create(
                EventType.SEARCH_DISCARDED,
                self._state,
                request_id=str(sequence),
            )
        )
        return True

    def _fail(self, message: str, error_code: str) -> None:
        self._state = self._state.model_copy(
            update={
                "is_loading": False,
                "response": None,
                "error": message,
                "error_code": error_code,
                "suggested_questions": list(self._initial_questions),
            }
        )

    async def _publish(self, event_type: EventType, sequence: int | None = None) -> None:
        await self._emitter.emit_async(
            StateChangedEvent.create(
                event_type,
                self._state,
                request_id=str(sequence) if sequence is not None else None,
            )
        )
