from __future__ import annotations

from typing import Any, Mapping

from ..errors import CardCreditLimitExceeded
from ..models import Card, CardEnvelope, Credit, CreditEnvelope, Debit, DebitEnvelope
from ..pagination import Page
from .base import ResourceService

__all__ = ["CardService", "CARD_CREDIT_LIMIT"]

# cents; card payouts above $2,500 are refused by the API
CARD_CREDIT_LIMIT = 250_000


class CardService(ResourceService):
    path = "/cards"
    envelope = CardEnvelope

    def create(self, card: Card) -> Card:
        """Tokenize a card.

        Declines and fraud flags drop when ``name``, ``cvv`` and the address
        postal and country codes are supplied.
        """
        return self._create(self.path, card)

    def fetch(self, card_id: str) -> Card:
        return self._fetch(card_id)

    def list(self, *args: Any, **filters: Any) -> Page[Card]:
        return self._list(self.path, *args, **filters)

    def update(self, card_id: str, params: Mapping[str, Any]) -> Card:
        return self._update(card_id, params)

    def delete(self, card_id: str) -> bool:
        return self._delete(card_id)

    def associate_with_customer(self, card_id: str, customer_id: str) -> Card:
        return self.update(card_id, {"customer": f"/customers/{customer_id}"})

    def charge(self, card_id: str, debit: Debit) -> Debit:
        return self._create(self._item_path(card_id, "debits"), debit, DebitEnvelope)

    def credit(self, card_id: str, credit: Credit) -> Credit:
        if credit.amount is not None and credit.amount > CARD_CREDIT_LIMIT:
            raise CardCreditLimitExceeded(credit.amount, CARD_CREDIT_LIMIT)
        return self._create(self._item_path(card_id, "credits"), credit, CreditEnvelope)
