"""Event data models."""

import json
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field

from profile_search.data.search import SearchState

from .types import EventType


class Event(BaseModel):
    """Base event model."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    event_type: EventType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)

    def to_json(self) -> str:
        """Serialize event to JSON string."""
        return json.dumps({
            "id": self.id,
            "type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "request_id": self.request_id,
            "data": self.data,
        })


class StateChangedEvent(Event):
    """Event carrying a snapshot of the search state after a transition."""

    @classmethod
    def create(
        cls,
        event_type: EventType,
        state: SearchState,
        request_id: str | None = None,
    ) -> "StateChangedEvent":
        return cls(
            event_type=event_type,
            request_id=request_id,
            data={"status": state.status.value, "state": state.model_dump(mode="json")},
        )
