"""Card holds.

Holds are an advanced feature: they reserve funds without capturing them and
expire on their own. Prefer debiting the card directly where possible.
"""
from __future__ import annotations

from typing import Any, Mapping

from ..models import CardHold, CardHoldEnvelope, Debit, DebitEnvelope
from ..pagination import Page
from .base import ResourceService, resource_path

__all__ = ["CardHoldService"]


class CardHoldService(ResourceService):
    path = "/card_holds"
    envelope = CardHoldEnvelope

    def create(self, card_id: str, hold: CardHold) -> CardHold:
        return self._create(resource_path("/cards", card_id, "card_holds"), hold)

    def fetch(self, hold_id: str) -> CardHold:
        return self._fetch(hold_id)

    def list(self, *args: Any, **filters: Any) -> Page[CardHold]:
        """Holds come back sorted from most recent to oldest."""
        return self._list(self.path, *args, **filters)

    def update(self, hold_id: str, params: Mapping[str, Any]) -> CardHold:
        return self._update(hold_id, params)

    def capture(self, hold_id: str, debit: Debit) -> Debit:
        """Capture up to the held amount, producing a debit."""
        return self._create(self._item_path(hold_id, "debits"), debit, DebitEnvelope)

    def void(self, hold_id: str) -> CardHold:
        """Cancel the hold; a voided hold can no longer be captured."""
        return self.update(hold_id, {"is_void": True})
