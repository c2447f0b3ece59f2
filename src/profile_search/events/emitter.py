"""Event emitter for search state observers."""

import asyncio
from dataclasses import dataclass
from typing import Any, Callable

from .models import Event
from .types import EventType
from ..utils.logging import get_logger

logger = get_logger(__name__)

EventHandler = Callable[[Event], Any]


@dataclass(frozen=True)
class _Subscription:
    id: str
    pattern: str
    handler: EventHandler

    def matches(self, event_type: EventType) -> bool:
        if self.pattern == "*" or self.pattern == event_type.value:
            return True
        if self.pattern.endswith(".*"):
            return event_type.value.startswith(self.pattern[:-1])
        return False


class EventEmitter:
    """
    Publish events to subscribers.

    Design Pattern: Observer Pattern

    Used by the search orchestrator to expose its state to renderers.
    Handlers run in subscription order; a failing handler is logged and
    never reaches the publisher or the remaining handlers. An optional
    queue receives every event as well.
    """

    def __init__(self, queue: asyncio.Queue[Event] | None = None):
        self._subscriptions: list[_Subscription] = []
        self._counter = 0
        self._queue = queue
        self._pending: set[asyncio.Task[None]] = set()

    def subscribe(self, pattern: str, handler: EventHandler) -> str:
        """
        Subscribe to events matching pattern.

        Args:
            pattern: "*", an exact event type ("search.completed"),
                or a prefix ("search.*")
            handler: Callable receiving the event; may be a coroutine function

        Returns:
            Subscription ID for unsubscribing
        """
        self._counter += 1
        sub_id = f"sub_{self._counter}"
        self._subscriptions.append(_Subscription(sub_id, pattern, handler))
        return sub_id

    def unsubscribe(self, subscription_id: str) -> bool:
        """Unsubscribe a handler by subscription ID."""
        for index, subscription in enumerate(self._subscriptions):
            if subscription.id == subscription_id:
                del self._subscriptions[index]
                return True
        return False

    def emit(self, event: Event) -> None:
        """
        Deliver an event from synchronous code.

        Coroutine handlers are scheduled on the running loop rather than
        awaited; without a running loop they are dropped with a warning.
        """
        if self._queue is not None:
            self._queue.put_nowait(event)

        for subscription, result in self._dispatch(event):
            if asyncio.iscoroutine(result):
                self._schedule(subscription, event, result)

    async def drain(self) -> None:
        """Wait for coroutine handlers scheduled by emit()."""
        while self._pending:
            await asyncio.gather(*self._pending)

    async def emit_async(self, event: Event) -> None:
        """Deliver an event, awaiting coroutine handlers in turn."""
        if self._queue is not None:
            await self._queue.put(event)

        for subscription, result in self._dispatch(event):
            if asyncio.iscoroutine(result):
                await self._guard(subscription, event, result)

    def _dispatch(self, event: Event):
        # Snapshot so handlers may unsubscribe while being called
        for subscription in list(self._subscriptions):
            if not subscription.matches(event.event_type):
                continue
            try:
                yield subscription, subscription.handler(event)
            except Exception:
                self._log_failure(subscription, event)

    def _schedule(self, subscription: _Subscription, event: Event, result: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            result.close()
            logger.warning(
                "No running event loop, async handler skipped",
                subscription=subscription.id,
                event_type=event.event_type.value,
            )
            return

        task = loop.create_task(self._guard(subscription, event, result))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _guard(self, subscription: _Subscription, event: Event, result: Any) -> None:
        try:
            await result
        except Exception:
            self._log_failure(subscription, event)

    @staticmethod
    def _log_failure(subscription: _Subscription, event: Event) -> None:
        logger.error(
            "Event handler failed",
            subscription=subscription.id,
            event_type=event.event_type.value,
            exc_info=True,
        )
