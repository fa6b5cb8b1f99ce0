from __future__ import annotations

from typing import Any

from ..models import Dispute, DisputeEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["DisputeService"]


class DisputeService(ResourceService):
    """Chargebacks are opened by card networks; the API only exposes reads."""

    path = "/disputes"
    envelope = DisputeEnvelope

    def fetch(self, dispute_id: str) -> Dispute:
        return self._fetch(dispute_id)

    def list(self, *args: Any, **filters: Any) -> Page[Dispute]:
        return self._list(self.path, *args, **filters)
