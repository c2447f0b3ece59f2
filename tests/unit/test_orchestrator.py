"""Tests for the search state machine."""

import asyncio

import pytest

from profile_search.core.exceptions import ProviderError, ProviderTimeoutError
from profile_search.data.content import ContentType
from profile_search.data.search import DEFAULT_SUGGESTED_QUESTIONS, SearchStatus
from profile_search.events.types import EventType
from profile_search.search.orchestrator import (
    SEARCH_ERROR_MESSAGE,
    SEARCH_TIMEOUT_MESSAGE,
    SearchOrchestrator,
)


def make_orchestrator(service, user_context=None, timeout_seconds=1.0):
    return SearchOrchestrator(
        service,
        "jane",
        user_context,
        timeout_seconds=timeout_seconds,
    )


class TestInitialState:
    """Tests for the idle state."""

    def test_idle_with_default_questions(self, make_service, fake_provider):
        """Test the orchestrator starts idle with the default questions."""
        orchestrator = make_orchestrator(make_service(fake_provider))
        state = orchestrator.state
        assert state.status == SearchStatus.IDLE
        assert state.query == ""
        assert state.suggested_questions == list(DEFAULT_SUGGESTED_QUESTIONS)
        assert orchestrator.initial_questions_loaded is False

    @pytest.mark.asyncio
    async def test_load_initial_questions(self, make_service, make_provider):
        """Test loaded questions replace the defaults."""
        orchestrator = make_orchestrator(make_service(make_provider("A?\nB?")))
        questions = await orchestrator.load_initial_questions()
        assert questions == ["A?", "B?"]
        assert orchestrator.state.suggested_questions == ["A?", "B?"]
        assert orchestrator.initial_questions_loaded is True

    @pytest.mark.asyncio
    async def test_load_initial_questions_timeout(self, make_service, make_provider):
        """Test a slow provider leaves the defaults in place."""
        orchestrator = make_orchestrator(
            make_service(make_provider("A?", delay=1.0)),
            timeout_seconds=0.05,
        )
        questions = await orchestrator.load_initial_questions()
        assert questions == list(DEFAULT_SUGGESTED_QUESTIONS)
        assert orchestrator.initial_questions_loaded is True


class TestSearch:
    """Tests for search transitions."""

    @pytest.mark.asyncio
    async def test_success(self, make_service, make_provider, user_context):
        """Test a successful search stores parsed content and suggestions."""
        provider = make_provider(
            "[CONTACT] Reach out!\n\nSuggested questions:\n- Rates?\n- Availability?"
        )
        orchestrator = make_orchestrator(make_service(provider), user_context)

        state = await orchestrator.search("How can I reach you?")

        assert state is orchestrator.state
        assert state.status == SearchStatus.SUCCESS
        assert state.is_loading is False
        assert state.error is None
        assert state.query == "How can I reach you?"
        assert state.response.type == ContentType.CONTACT
        assert len(state.response.data.methods) == 4
        assert state.suggested_questions == ["Rates?", "Availability?"]

    @pytest.mark.asyncio
    async def test_success_without_suggestions(self, make_service, make_provider):
        """Test the initial questions are kept when the answer has none."""
        orchestrator = make_orchestrator(make_service(make_provider("plain text")))
        state = await orchestrator.search("Hi")
        assert state.response.type == ContentType.TEXT
        assert state.suggested_questions == list(DEFAULT_SUGGESTED_QUESTIONS)

    @pytest.mark.asyncio
    async def test_provider_failure(self, make_service, make_provider):
        """Test a provider error ends in the static error state."""
        provider = make_provider(error=ProviderError("boom", provider="fake"))
        orchestrator = make_orchestrator(make_service(provider))

        state = await orchestrator.search("Hi")

        assert state.is_loading is False
        assert state.error == SEARCH_ERROR_MESSAGE
        assert state.error_code == "provider_error"
        assert state.response is None
        assert state.suggested_questions == list(DEFAULT_SUGGESTED_QUESTIONS)
        assert len(state.suggested_questions) == 4

    @pytest.mark.asyncio
    async def test_timeout(self, make_service, make_provider):
        """Test a slow provider ends in the timeout error state."""
        orchestrator = make_orchestrator(
            make_service(make_provider("late", delay=1.0)),
            timeout_seconds=0.05,
        )
        state = await orchestrator.search("Hi")
        assert state.error == SEARCH_TIMEOUT_MESSAGE
        assert state.error_code == "timeout"
        assert state.response is None

    @pytest.mark.asyncio
    async def test_provider_timeout_error(self, make_service, make_provider):
        """Test a provider-side timeout is reported as a timeout."""
        provider = make_provider(error=ProviderTimeoutError("slow", timeout_seconds=8.0))
        state = await make_orchestrator(make_service(provider)).search("Hi")
        assert state.error_code == "timeout"

    @pytest.mark.asyncio
    async def test_select_suggested_question(self, make_service, make_provider):
        """Test selecting a suggestion searches for it."""
        provider = make_provider("plain text")
        orchestrator = make_orchestrator(make_service(provider))
        state = await orchestrator.select_suggested_question("Tell me about yourself")
        assert state.query == "Tell me about yourself"
        assert provider.calls[0]["prompt"] == "Tell me about yourself"

    @pytest.mark.asyncio
    async def test_retry_repeats_query(self, make_service, make_provider):
        """Test retry re-runs the last query after an error."""
        provider = make_provider(replies={"Hi": ProviderError("boom")})
        orchestrator = make_orchestrator(make_service(provider))

        await orchestrator.search("Hi")
        assert orchestrator.state.status == SearchStatus.ERROR

        provider.replies = {}
        state = await orchestrator.retry()
        assert state.status == SearchStatus.SUCCESS
        assert [call["prompt"] for call in provider.calls] == ["Hi", "Hi"]

    @pytest.mark.asyncio
    async def test_retry_without_query(self, make_service, fake_provider):
        """Test retry is a no-op before any search."""
        orchestrator = make_orchestrator(make_service(fake_provider))
        state = await orchestrator.retry()
        assert state.status == SearchStatus.IDLE
        assert fake_provider.calls == []


class TestClear:
    """Tests for clear()."""

    @pytest.mark.asyncio
    async def test_clear_restores_initial_questions(self, make_service, make_provider):
        """Test clear resets the state."""
        provider = make_provider(replies={"List the questions.": "A?\nB?"})
        orchestrator = make_orchestrator(make_service(provider))
        await orchestrator.load_initial_questions()
        await orchestrator.search("Hi")

        state = orchestrator.clear()

        assert state.status == SearchStatus.IDLE
        assert state.query == ""
        assert state.response is None
        assert state.error is None
        assert state.suggested_questions == ["A?", "B?"]

    @pytest.mark.asyncio
    async def test_clear_discards_in_flight_search(self, make_service, make_provider):
        """Test a search finishing after clear does not overwrite the reset."""
        orchestrator = make_orchestrator(make_service(make_provider("late", delay=0.1)))

        task = asyncio.create_task(orchestrator.search("Hi"))
        await asyncio.sleep(0.01)
        assert orchestrator.state.is_loading is True

        orchestrator.clear()
        await task

        assert orchestrator.state.status == SearchStatus.IDLE
        assert orchestrator.state.response is None


class TestConcurrentSearches:
    """Tests for overlapping searches."""

    @pytest.mark.asyncio
    async def test_stale_result_discarded(self, make_service, make_provider):
        """Test only the latest search writes its result."""
        provider = make_provider(
            replies={"first": "[CARDS] first answer", "second": "second answer"},
            delays={"first": 0.2},
        )
        orchestrator = make_orchestrator(make_service(provider))
        events = []
        orchestrator.subscribe(events.append, "search.discarded")

        first = asyncio.create_task(orchestrator.search("first"))
        await asyncio.sleep(0.01)
        await orchestrator.search("second")
        await first

        state = orchestrator.state
        assert state.query == "second"
        assert state.response.type == ContentType.TEXT
        assert state.response.data.content == "second answer"
        assert [event.request_id for event in events] == ["1"]

    @pytest.mark.asyncio
    async def test_stale_failure_discarded(self, make_service, make_provider):
        """Test a late failure does not replace a newer success."""
        provider = make_provider(
            replies={"first": ProviderError("boom"), "second": "second answer"},
            delays={"first": 0.2},
        )
        orchestrator = make_orchestrator(make_service(provider))

        first = asyncio.create_task(orchestrator.search("first"))
        await asyncio.sleep(0.01)
        await orchestrator.search("second")
        await first

        assert orchestrator.state.status == SearchStatus.SUCCESS
        assert orchestrator.state.error is None


class TestEvents:
    """Tests for state change events."""

    @pytest.mark.asyncio
    async def test_search_events(self, make_service, make_provider):
        """Test a search publishes started then completed."""
        orchestrator = make_orchestrator(make_service(make_provider("plain text")))
        events = []
        orchestrator.subscribe(events.append)

        await orchestrator.search("Hi")

        assert [event.event_type for event in events] == [
            EventType.SEARCH_STARTED,
            EventType.SEARCH_COMPLETED,
        ]
        assert events[0].data["status"] == "loading"
        assert events[1].data["status"] == "success"
        assert events[1].data["state"]["response"]["type"] == "text"

    @pytest.mark.asyncio
    async def test_failure_and_clear_events(self, make_service, make_provider):
        """Test failure and clear are published."""
        orchestrator = make_orchestrator(make_service(make_provider(error=ProviderError("x"))))
        events = []
        subscription = orchestrator.subscribe(events.append)

        await orchestrator.search("Hi")
        orchestrator.clear()

        assert [event.event_type for event in events] == [
            EventType.SEARCH_STARTED,
            EventType.SEARCH_FAILED,
            EventType.SEARCH_CLEARED,
        ]
        assert orchestrator.unsubscribe(subscription) is True


class TestBlankQueries:
    """Tests for empty and whitespace-only queries."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "   \n\t"])
    async def test_blank_query_is_ignored(self, make_service, fake_provider, query):
        """Test a blank query neither raises nor leaves the state loading."""
        orchestrator = make_orchestrator(make_service(fake_provider))
        events = []
        orchestrator.subscribe(events.append)
        before = orchestrator.state

        state = await orchestrator.select_suggested_question(query)

        assert state is before
        assert state.is_loading is False
        assert state.status == SearchStatus.IDLE
        assert fake_provider.calls == []
        assert events == []

    @pytest.mark.asyncio
    async def test_blank_query_keeps_previous_result(self, make_service, make_provider):
        """Test a blank query after a search keeps the shown answer."""
        orchestrator = make_orchestrator(make_service(make_provider("plain text")))
        await orchestrator.search("Hi")

        state = await orchestrator.search("  ")

        assert state.status == SearchStatus.SUCCESS
        assert state.query == "Hi"

    @pytest.mark.asyncio
    async def test_query_is_trimmed(self, make_service, fake_provider):
        """Test surrounding whitespace is dropped before searching."""
        orchestrator = make_orchestrator(make_service(fake_provider))
        state = await orchestrator.search("  What do you do?  ")
        assert state.query == "What do you do?"
        assert fake_provider.calls[0]["prompt"] == "What do you do?"


class TestParsedContentReuse:
    """Tests for reusing the service's parsed content."""

    @pytest.mark.asyncio
    async def test_completion_parsed_once(self, make_service, make_provider, monkeypatch):
        """Test the orchestrator uses the content built by the service."""

        def fail(*args, **kwargs):
            raise AssertionError("completion parsed a second time")

        monkeypatch.setattr("profile_search.search.orchestrator.parse_ai_response", fail)
        orchestrator = make_orchestrator(make_service(make_provider("[TABS] Overview")))

        state = await orchestrator.search("Hi")

        assert state.status == SearchStatus.SUCCESS
        assert state.response.type == ContentType.TABS
