from __future__ import annotations

from typing import Any, Mapping

from ..models import BankAccount, Card, Customer, CustomerEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["CustomerService"]


class CustomerService(ResourceService):
    path = "/customers"
    envelope = CustomerEnvelope

    def create(self, customer: Customer) -> Customer:
        return self._create(self.path, customer)

    def fetch(self, customer_id: str) -> Customer:
        return self._fetch(customer_id)

    def list(self, *args: Any, **filters: Any) -> Page[Customer]:
        return self._list(self.path, *args, **filters)

    def update(self, customer_id: str, params: Mapping[str, Any]) -> Customer:
        return self._update(customer_id, params)

    def delete(self, customer_id: str) -> bool:
        return self._delete(customer_id)

    def associate_with_card(self, customer_id: str, card_id: str) -> Card:
        return self._client.cards.associate_with_customer(card_id, customer_id)

    def associate_with_bank_account(self, customer_id: str, account_id: str) -> BankAccount:
        return self._client.bank_accounts.associate_with_customer(account_id, customer_id)
