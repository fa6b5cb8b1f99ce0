from __future__ import annotations

from typing import Any

from ..models import Marketplace, MarketplaceEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["MarketplaceService"]


class MarketplaceService(ResourceService):
    path = "/marketplaces"
    envelope = MarketplaceEnvelope

    def create(self) -> Marketplace:
        """Create a test marketplace owned by the current API key."""
        return self._create(self.path)

    def fetch(self, marketplace_id: str) -> Marketplace:
        return self._fetch(marketplace_id)

    def list(self, *args: Any, **filters: Any) -> Page[Marketplace]:
        return self._list(self.path, *args, **filters)
