from __future__ import annotations

from typing import Any, Mapping

from ..models import BankAccount, BankAccountEnvelope, Credit, CreditEnvelope, Debit, DebitEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["BankAccountService"]


class BankAccountService(ResourceService):
    path = "/bank_accounts"
    envelope = BankAccountEnvelope

    def create(self, account: BankAccount) -> BankAccount:
        return self._create(self.path, account)

    def fetch(self, account_id: str) -> BankAccount:
        return self._fetch(account_id)

    def list(self, *args: Any, **filters: Any) -> Page[BankAccount]:
        return self._list(self.path, *args, **filters)

    def update(self, account_id: str, params: Mapping[str, Any]) -> BankAccount:
        return self._update(account_id, params)

    def update_meta(self, account_id: str, meta: Mapping[str, Any]) -> BankAccount:
        return self.update(account_id, {"meta": dict(meta)})

    def delete(self, account_id: str) -> bool:
        return self._delete(account_id)

    def associate_with_customer(self, account_id: str, customer_id: str) -> BankAccount:
        return self.update(account_id, {"customer": f"/customers/{customer_id}"})

    def debit(self, account_id: str, debit: Debit) -> Debit:
        # this endpoint expects the debit wrapped in a collection envelope
        body = {"debits": [debit]}
        return self._create(self._item_path(account_id, "debits"), body, DebitEnvelope)

    def credit(self, account_id: str, credit: Credit) -> Credit:
        return self._create(self._item_path(account_id, "credits"), credit, CreditEnvelope)
