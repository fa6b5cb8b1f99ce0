from __future__ import annotations

from typing import Any, Mapping

from ..models import Credit, CreditEnvelope
from ..pagination import Page
from .base import ResourceService, resource_path

__all__ = ["CreditService"]


class CreditService(ResourceService):
    path = "/credits"
    envelope = CreditEnvelope

    def create_to_bank_account(self, account_id: str, credit: Credit) -> Credit:
        return self._client.bank_accounts.credit(account_id, credit)

    def create_to_card(self, card_id: str, credit: Credit) -> Credit:
        return self._client.cards.credit(card_id, credit)

    def create_for_order(self, account_id: str, order_id: str, credit: Credit) -> Credit:
        """Pay the seller's bank account out of an order's escrow."""
        credit = credit.model_copy(update={"order": f"/orders/{order_id}"})
        return self.create_to_bank_account(account_id, credit)

    def fetch(self, credit_id: str) -> Credit:
        return self._fetch(credit_id)

    def list(self, *args: Any, **filters: Any) -> Page[Credit]:
        return self._list(self.path, *args, **filters)

    def list_for_bank_account(self, account_id: str, *args: Any, **filters: Any) -> Page[Credit]:
        path = resource_path("/bank_accounts", account_id, "credits")
        return self._list(path, *args, **filters)

    def update(self, credit_id: str, params: Mapping[str, Any]) -> Credit:
        return self._update(credit_id, params)
