"""Event type enumerations."""

from enum import Enum


class EventType(str, Enum):
    """Search state transitions published by the orchestrator."""

    # Search lifecycle
    SEARCH_STARTED = "search.started"
    SEARCH_COMPLETED = "search.completed"
    SEARCH_FAILED = "search.failed"
    SEARCH_CLEARED = "search.cleared"
    SEARCH_DISCARDED = "search.discarded"  # Superseded by a newer search

    # Initial suggested questions
    SUGGESTIONS_LOADED = "suggestions.loaded"
