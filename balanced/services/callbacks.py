from __future__ import annotations

from typing import Any

from ..models import Callback, CallbackEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["CallbackService"]


class CallbackService(ResourceService):
    """Webhook registrations; the API POSTs (or PUTs/GETs) events to ``url``."""

    path = "/callbacks"
    envelope = CallbackEnvelope

    def create(self, url: str, method: str = "post") -> Callback:
        return self._create(self.path, Callback(url=url, method=method))

    def fetch(self, callback_id: str) -> Callback:
        return self._fetch(callback_id)

    def list(self, *args: Any, **filters: Any) -> Page[Callback]:
        return self._list(self.path, *args, **filters)

    def delete(self, callback_id: str) -> bool:
        return self._delete(callback_id)
