"""Entry point: one `BalancedClient` per API secret."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from common.secrets import get_secret

from . import BASE_URL
from .http import BalancedHTTP
from .services import (
    ApiKeyService,
    BankAccountService,
    CallbackService,
    CardHoldService,
    CardService,
    CreditService,
    CustomerService,
    DebitService,
    DisputeService,
    EventService,
    MarketplaceService,
    OrderService,
    RefundService,
    ReversalService,
    VerificationService,
)

__all__ = ["BalancedClient", "SECRET_KEY"]

_LOG = logging.getLogger(__name__)

SECRET_KEY = "BALANCED_API_SECRET"


class BalancedClient:
    """Holds the transport and one service per resource family.

    The secret comes from the ``secret`` argument, else the secrets file, else
    the ``BALANCED_API_SECRET`` environment variable. Without one, requests go
    out unauthenticated (enough for creating an API key or a test marketplace).

    Pass ``http_client`` to reuse an existing `httpx.Client` (it is not closed
    by :meth:`close`), or ``transport`` to swap the network layer, e.g. for
    `httpx.MockTransport` in tests.
    """

    def __init__(
        self,
        secret: Optional[str] = None,
        *,
        base_url: str = BASE_URL,
        http_client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if secret is None:
            secret = get_secret(SECRET_KEY)
        self.http = BalancedHTTP(
            secret,
            base_url=base_url,
            client=http_client,
            transport=transport,
        )
        _LOG.debug("Balanced client ready: base_url=%s auth=%s", base_url, self.http.has_secret)

        self.api_keys = ApiKeyService(self)
        self.bank_accounts = BankAccountService(self)
        self.verifications = VerificationService(self)
        self.callbacks = CallbackService(self)
        self.cards = CardService(self)
        self.card_holds = CardHoldService(self)
        self.credits = CreditService(self)
        self.customers = CustomerService(self)
        self.debits = DebitService(self)
        self.disputes = DisputeService(self)
        self.events = EventService(self)
        self.orders = OrderService(self)
        self.refunds = RefundService(self)
        self.reversals = ReversalService(self)
        self.marketplaces = MarketplaceService(self)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "BalancedClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
