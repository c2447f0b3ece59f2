"""Pytest fixtures for testing."""

import asyncio

import pytest

from profile_search.config.settings import Settings
from profile_search.data.context import ProfileLink, UserContext
from profile_search.events.emitter import EventEmitter
from profile_search.events.models import Event
from profile_search.search.service import AISearchService
from profile_search.utils.llm import LLMClient
from profile_search.utils.providers.base import BaseLLMProvider, LLMResponse, TokenUsage


class FakeProvider(BaseLLMProvider):
    """
    Scripted completion provider.

    Replies are looked up by prompt, falling back to ``content``. A reply
    that is an exception is raised instead of returned.
    """

    DEFAULT_MODEL = "fake-model"

    def __init__(
        self,
        content: str = "Hello from the fake provider.",
        *,
        error: Exception | None = None,
        delay: float = 0.0,
        replies: dict[str, str | Exception] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.content = content
        self.error = error
        self.delay = delay
        self.replies = replies or {}
        self.delays = delays or {}
        self.calls: list[dict] = []
        self.closed = False

    @property
    def provider_name(self) -> str:
        return "fake"

    async def complete(
        self,
        prompt: str,
        system: str = "",
        model: str | None = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ) -> LLMResponse:
        self.calls.append(
            {
                "prompt": prompt,
                "system": system,
                "model": model,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )

        delay = self.delays.get(prompt, self.delay)
        if delay:
            await asyncio.sleep(delay)

        if self.error is not None:
            raise self.error

        reply = self.replies.get(prompt, self.content)
        if isinstance(reply, Exception):
            raise reply

        return LLMResponse(
            content=reply,
            model=self.resolve_model(model),
            usage=TokenUsage(input_tokens=10, output_tokens=20),
            stop_reason="stop",
            provider=self.provider_name,
        )

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        openai_api_key="test-key",
        log_level="DEBUG",
    )


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Create a fake provider with the default reply."""
    return FakeProvider()


@pytest.fixture
def make_service(settings: Settings):
    """Build a search service around a fake provider."""

    def _make(provider: FakeProvider) -> AISearchService:
        return AISearchService(LLMClient(provider=provider), settings=settings)

    return _make


@pytest.fixture
def user_context() -> UserContext:
    """Profile with two regular links and two social links."""
    return UserContext.from_profile(
        display_name="Jane Doe",
        bio="Designer and photographer",
        avatar=None,
        links=[
            ProfileLink(id="l1", title="Portfolio site", url="https://janedoe.design"),
            ProfileLink(id="l2", title="GitHub", url="https://github.com/janedoe"),
            ProfileLink(id="l3", title="Shop", url="https://shop.janedoe.design"),
            ProfileLink(id="l4", title="Twitter", url="https://twitter.com/janedoe"),
            ProfileLink(id="l5", title="Old blog", url="https://old.example.com", active=False),
        ],
    )


@pytest.fixture
def event_queue() -> asyncio.Queue[Event]:
    """Create event queue for testing."""
    return asyncio.Queue()


@pytest.fixture
def event_emitter(event_queue: asyncio.Queue[Event]) -> EventEmitter:
    """Create event emitter for testing."""
    return EventEmitter(event_queue)


@pytest.fixture
def make_provider() -> type[FakeProvider]:
    """Fake provider class, for tests that script their own replies."""
    return FakeProvider
