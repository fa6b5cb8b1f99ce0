from __future__ import annotations

import pytest

from balanced.pagination import DEFAULT_LIMIT, DEFAULT_OFFSET, Page, PageParams, Pagination


def test_ints_map_to_offset_then_limit():
    params = PageParams.from_args(20, 5)
    assert params.to_query() == {"offset": 20, "limit": 5}


def test_extra_ints_are_ignored():
    assert PageParams.from_args(1, 2, 3, 4).to_query() == {"offset": 1, "limit": 2}


def test_single_int_is_offset_only():
    assert PageParams.from_args(30).to_query() == {"offset": 30}


def test_mappings_and_keywords_merge_as_filters():
    params = PageParams.from_args({"status": "succeeded"}, {"currency": "USD"}, q="abc")
    assert params.to_query() == {"status": "succeeded", "currency": "USD", "q": "abc"}


def test_explicit_offset_and_limit_override_filters():
    params = PageParams.from_args({"limit": 99, "offset": 99}, 0, 25)
    assert params.to_query() == {"offset": 0, "limit": 25}


def test_page_params_instance_merges():
    params = PageParams.from_args(PageParams(limit=3, filters={"a": 1}), 7)
    assert params.offset == 7
    assert params.limit == 3
    assert params.filters == {"a": 1}


def test_no_args_is_empty_query():
    assert PageParams.from_args().to_query() == {}


@pytest.mark.parametrize("bad", ["10", 1.5, None, [1, 2]])
def test_unsupported_argument_types_raise(bad):
    with pytest.raises(TypeError):
        PageParams.from_args(bad)


def test_bools_are_not_treated_as_ints():
    with pytest.raises(TypeError):
        PageParams.from_args(True)


def test_pagination_defaults_when_meta_missing():
    p = Pagination.from_meta(None)
    assert (p.limit, p.offset, p.total) == (DEFAULT_LIMIT, DEFAULT_OFFSET, 0)
    assert p.next is None and not p.has_next


def test_pagination_null_limit_offset_fall_back():
    p = Pagination.from_meta({"limit": None, "offset": None, "total": 4, "next": None})
    assert (p.limit, p.offset, p.total) == (10, 0, 4)


def test_pagination_reads_links():
    p = Pagination.from_meta(
        {
            "limit": 2,
            "offset": 0,
            "total": 5,
            "first": "/cards?limit=2&offset=0",
            "href": "/cards?limit=2&offset=0",
            "last": "/cards?limit=2&offset=4",
            "next": "/cards?limit=2&offset=2",
            "previous": None,
            "unexpected": "ignored",
        }
    )
    assert p.has_next
    assert p.last == "/cards?limit=2&offset=4"
    assert p.previous is None


def test_page_behaves_like_a_sequence():
    page = Page(items=["a", "b"], pagination=Pagination(limit=2, offset=4, total=9))
    assert list(page) == ["a", "b"]
    assert len(page) == 2
    assert (page.total, page.limit, page.offset) == (9, 2, 4)


def test_list_sends_pagination_query(client, fake_api):
    for n in range(5):
        fake_api.seed("customers", name=f"c{n}")

    page = client.customers.list(2, 2)

    assert fake_api.last.url.params["offset"] == "2"
    assert fake_api.last.url.params["limit"] == "2"
    assert [c.name for c in page] == ["c2", "c3"]
    assert page.total == 5
    assert page.pagination.has_next


def test_list_without_args_sends_no_query(client, fake_api):
    client.cards.list()
    assert str(fake_api.last.url) == "https://api.balancedpayments.com/cards"


def test_list_filters_are_forwarded(client, fake_api):
    fake_api.seed("debits", description="one")
    fake_api.seed("debits", description="two")
    page = client.debits.list({"description": "two"})
    assert fake_api.last.url.params["description"] == "two"
    assert [d.description for d in page] == ["two"]
