from __future__ import annotations

import pytest

from balanced import CardCreditLimitExceeded
from balanced.errors import BalancedError
from balanced.models import Address, Card, Credit, Debit
from balanced.services import CARD_CREDIT_LIMIT


@pytest.fixture
def card(client):
    return client.cards.create(
        Card(
            number="4111111111111111",
            expiration_month=12,
            expiration_year=2016,
            cvv="123",
            name="Johannes Bach",
            address=Address(postal_code="94301", country_code="USA"),
        )
    )


def test_create_returns_server_fields(card, fake_api):
    assert card.id.startswith("CC")
    assert card.href == f"/cards/{card.id}"
    assert card.created_at is not None
    assert fake_api.last.method == "POST"
    assert fake_api.last.url.path == "/cards"
    assert fake_api.last_json()["address"] == {"postal_code": "94301", "country_code": "USA"}


def test_fetch_update_delete(client, card, fake_api):
    fetched = client.cards.fetch(card.id)
    assert fetched.id == card.id and fetched.name == "Johannes Bach"

    updated = client.cards.update(card.id, {"meta": {"facebook.user_id": "0192837465"}})
    assert fake_api.last.method == "PUT"
    assert updated.meta == {"facebook.user_id": "0192837465"}

    assert client.cards.delete(card.id) is True
    assert fake_api.last.method == "DELETE"
    assert client.cards.list().total == 0


def test_list(client, card):
    page = client.cards.list()
    assert page.total == 1
    assert page.items[0].id == card.id


def test_associate_with_customer(client, card, fake_api):
    cust = fake_api.seed("customers", name="Henry Ford")

    associated = client.cards.associate_with_customer(card.id, cust["id"])

    assert fake_api.last.method == "PUT"
    assert fake_api.last_json() == {"customer": f"/customers/{cust['id']}"}
    assert associated.links["customer"] == cust["id"]


def test_charge_creates_debit(client, card, fake_api):
    debit = client.cards.charge(
        card.id, Debit(amount=5000, appears_on_statement_as="Statement text", description="Some descriptive text")
    )
    assert fake_api.last.url.path == f"/cards/{card.id}/debits"
    assert fake_api.last_json() == {
        "amount": 5000,
        "appears_on_statement_as": "Statement text",
        "description": "Some descriptive text",
    }
    assert debit.id.startswith("WD")
    assert debit.amount == 5000
    assert debit.status == "succeeded"


def test_credit_at_limit_is_sent(client, card, fake_api):
    credit = client.cards.credit(card.id, Credit(amount=CARD_CREDIT_LIMIT))
    assert CARD_CREDIT_LIMIT == 250_000
    assert fake_api.last.url.path == f"/cards/{card.id}/credits"
    assert credit.amount == 250_000


def test_credit_over_limit_never_hits_the_network(client, card, fake_api):
    sent = len(fake_api.requests)
    with pytest.raises(CardCreditLimitExceeded) as exc_info:
        client.cards.credit(card.id, Credit(amount=250_001))
    assert len(fake_api.requests) == sent
    assert isinstance(exc_info.value, BalancedError)
    assert isinstance(exc_info.value, ValueError)
    assert str(exc_info.value) == "Cannot credit more than $2,500 to a card, but tried crediting 2500.01"


def test_empty_id_is_rejected_before_request(client, fake_api):
    with pytest.raises(ValueError):
        client.cards.fetch("")
    assert fake_api.requests == []
