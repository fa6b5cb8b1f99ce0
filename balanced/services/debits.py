from __future__ import annotations

from typing import Any, Mapping

from ..models import Debit, DebitEnvelope, Refund, RefundEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["DebitService"]


class DebitService(ResourceService):
    """Debits are created through `CardService.charge`, `BankAccountService.debit`
    or `CardHoldService.capture`; this service reads and annotates them."""

    path = "/debits"
    envelope = DebitEnvelope

    def fetch(self, debit_id: str) -> Debit:
        return self._fetch(debit_id)

    def list(self, *args: Any, **filters: Any) -> Page[Debit]:
        return self._list(self.path, *args, **filters)

    def update(self, debit_id: str, params: Mapping[str, Any]) -> Debit:
        return self._update(debit_id, params)

    def refund(self, debit_id: str, refund: Refund) -> Refund:
        return self._create(self._item_path(debit_id, "refunds"), refund, RefundEnvelope)
