"""Sandbox round trips; run with BALANCED_LIVE=1 and BALANCED_API_SECRET set."""
from __future__ import annotations

import pytest

from balanced import BalancedClient
from balanced.models import Card, Customer, Debit

pytestmark = pytest.mark.live


@pytest.fixture
def live_client():
    with BalancedClient() as c:
        if not c.http.has_secret:
            pytest.skip("BALANCED_API_SECRET not set")
        yield c


def test_customer_roundtrip(live_client):
    created = live_client.customers.create(Customer(name="Live Smoke", email="live@example.com"))
    try:
        assert live_client.customers.fetch(created.id).email == "live@example.com"
    finally:
        assert live_client.customers.delete(created.id)


def test_card_charge(live_client):
    card = live_client.cards.create(Card(number="4111111111111111", expiration_month=12, expiration_year=2030, cvv="123"))
    debit = live_client.cards.charge(card.id, Debit(amount=100, description="live smoke"))
    assert debit.amount == 100
    assert debit.status in ("pending", "succeeded")
