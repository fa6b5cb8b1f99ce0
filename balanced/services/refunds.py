from __future__ import annotations

from typing import Any, Mapping

from ..models import Refund, RefundEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["RefundService"]


class RefundService(ResourceService):
    path = "/refunds"
    envelope = RefundEnvelope

    def fetch(self, refund_id: str) -> Refund:
        return self._fetch(refund_id)

    def list(self, *args: Any, **filters: Any) -> Page[Refund]:
        return self._list(self.path, *args, **filters)

    def update(self, refund_id: str, params: Mapping[str, Any]) -> Refund:
        return self._update(refund_id, params)
