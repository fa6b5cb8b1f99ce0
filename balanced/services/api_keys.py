from __future__ import annotations

from typing import Any

from ..models import ApiKey, ApiKeyEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["ApiKeyService"]


class ApiKeyService(ResourceService):
    path = "/api_keys"
    envelope = ApiKeyEnvelope

    def create(self) -> ApiKey:
        """Issue a new key; its ``secret`` is only ever returned here."""
        return self._create(self.path)

    def fetch(self, key_id: str) -> ApiKey:
        return self._fetch(key_id)

    def list(self, *args: Any, **filters: Any) -> Page[ApiKey]:
        return self._list(self.path, *args, **filters)

    def delete(self, key_id: str) -> bool:
        return self._delete(key_id)
