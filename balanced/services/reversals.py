from __future__ import annotations

from typing import Any, Mapping

from ..models import Reversal, ReversalEnvelope
from ..pagination import Page
from .base import ResourceService, resource_path

__all__ = ["ReversalService"]


class ReversalService(ResourceService):
    path = "/reversals"
    envelope = ReversalEnvelope

    def create(self, credit_id: str, reversal: Reversal) -> Reversal:
        return self._create(resource_path("/credits", credit_id, "reversals"), reversal)

    def fetch(self, reversal_id: str) -> Reversal:
        return self._fetch(reversal_id)

    def list(self, *args: Any, **filters: Any) -> Page[Reversal]:
        return self._list(self.path, *args, **filters)

    def update(self, reversal_id: str, params: Mapping[str, Any]) -> Reversal:
        return self._update(reversal_id, params)
