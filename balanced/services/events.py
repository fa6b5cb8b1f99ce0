from __future__ import annotations

from typing import Any

from ..models import Event, EventEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["EventService"]


class EventService(ResourceService):
    path = "/events"
    envelope = EventEnvelope

    def fetch(self, event_id: str) -> Event:
        return self._fetch(event_id)

    def list(self, *args: Any, **filters: Any) -> Page[Event]:
        return self._list(self.path, *args, **filters)
