from __future__ import annotations

from balanced.models import Event


def test_api_keys(client, fake_api):
    key = client.api_keys.create()
    assert fake_api.last.method == "POST"
    assert fake_api.last.content == b""
    assert key.secret.startswith("ak-test-")

    assert client.api_keys.fetch(key.id).id == key.id
    assert client.api_keys.list().total == 1
    assert client.api_keys.delete(key.id) is True
    assert client.api_keys.list().total == 0


def test_marketplaces(client, fake_api):
    mp = client.marketplaces.create()
    assert fake_api.last.url.path == "/marketplaces"
    assert mp.id.startswith("MP")
    assert client.marketplaces.fetch(mp.id).href == f"/marketplaces/{mp.id}"
    assert client.marketplaces.list().total == 1


def test_callbacks(client, fake_api):
    cb = client.callbacks.create("http://www.example.com/callback")
    assert fake_api.last_json() == {"url": "http://www.example.com/callback", "method": "post"}

    put_cb = client.callbacks.create("http://www.example.com/other", method="put")
    assert put_cb.method == "put"

    assert client.callbacks.fetch(cb.id).url == "http://www.example.com/callback"
    assert client.callbacks.list().total == 2
    assert client.callbacks.delete(cb.id)
    assert client.callbacks.list().total == 1


def test_events_carry_entity_snapshot(client, fake_api):
    ev = fake_api.seed(
        "events",
        type="debit.created",
        occurred_at="2014-03-06T19:22:54.416730Z",
        entity={"debits": [{"id": "WD123", "amount": 5000, "status": "succeeded"}], "links": {}},
        callback_statuses={"failed": 0, "pending": 1, "retrying": 0, "succeeded": 2},
    )

    event = client.events.fetch(ev["id"])

    assert isinstance(event, Event)
    assert event.type == "debit.created"
    assert event.occurred_at.microsecond == 416730
    assert event.entity.debits[0].amount == 5000
    assert event.entity.cards is None
    assert event.callback_statuses.succeeded == 2

    page = client.events.list({"type": "debit.created"})
    assert page.total == 1
