"""Event system for search state observation."""

from profile_search.events.types import EventType
from profile_search.events.models import Event, StateChangedEvent
from profile_search.events.emitter import EventEmitter

__all__ = [
    "EventType",
    "Event",
    "StateChangedEvent",
    "EventEmitter",
]
