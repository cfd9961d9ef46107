"""
Tests for the card API provider, with the HTTP layer mocked out
"""

import pytest
import responses
from responses import matchers

from swu_data import constants
from swu_data.errors import MissingRequiredField, TransportFailure
from swu_data.providers import SwuApiProvider

ENDPOINT = "https://cards.example.com/api/cards"


def page_matcher(page: int, page_size: int = 2):
    return matchers.query_param_matcher(
        {
            "locale": "en",
            "sort[0]": constants.CARD_SORT_ORDER,
            "pagination[pageSize]": str(page_size),
            "pagination[page]": str(page),
        }
    )


@pytest.fixture
def provider() -> SwuApiProvider:
    return SwuApiProvider(endpoint=ENDPOINT, page_size=2)


def test_defaults_come_from_config():
    provider = SwuApiProvider()

    assert provider.endpoint == constants.DEFAULT_ENDPOINT
    assert provider.page_size == constants.DEFAULT_PAGE_SIZE
    assert provider.locale == "en"


def test_page_params(provider):
    assert provider.get_page_params(3) == {
        "locale": "en",
        "sort[0]": "type.sortValue:asc,cardNumber:asc",
        "pagination[pageSize]": 2,
        "pagination[page]": 3,
    }


@responses.activate
def test_walks_every_page_in_order(provider, make_raw_card, make_page):
    first = [make_raw_card(number=1), make_raw_card(number=2)]
    second = [make_raw_card(number=3)]
    responses.get(ENDPOINT, json=make_page(first, 2), match=[page_matcher(1)])
    responses.get(ENDPOINT, json=make_page(second, 2), match=[page_matcher(2)])

    raw_cards = list(provider.iterate_raw_cards())

    assert [raw["attributes"]["cardNumber"] for raw in raw_cards] == [1, 2, 3]
    assert len(responses.calls) == 2


@responses.activate
def test_single_page(provider, make_raw_card, make_page):
    responses.get(
        ENDPOINT, json=make_page([make_raw_card()], 1), match=[page_matcher(1)]
    )

    assert len(list(provider.iterate_raw_cards())) == 1
    assert len(responses.calls) == 1


@responses.activate
def test_empty_listing(provider, make_page):
    responses.get(ENDPOINT, json=make_page([], 0), match=[page_matcher(1)])

    assert list(provider.iterate_raw_cards()) == []
    assert len(responses.calls) == 1


@responses.activate
def test_pages_are_fetched_lazily(provider, make_raw_card, make_page):
    responses.get(
        ENDPOINT, json=make_page([make_raw_card(number=1)], 3), match=[page_matcher(1)]
    )
    responses.get(
        ENDPOINT, json=make_page([make_raw_card(number=2)], 3), match=[page_matcher(2)]
    )
    responses.get(
        ENDPOINT, json=make_page([make_raw_card(number=3)], 3), match=[page_matcher(3)]
    )

    raw_cards = provider.iterate_raw_cards()
    assert len(responses.calls) == 0

    next(raw_cards)
    assert len(responses.calls) == 1

    next(raw_cards)
    assert len(responses.calls) == 2


@responses.activate
@pytest.mark.parametrize("status", [404, 500, 503])
def test_error_status_is_fatal(provider, status):
    responses.get(ENDPOINT, status=status, match=[page_matcher(1)])

    with pytest.raises(TransportFailure) as excinfo:
        list(provider.iterate_raw_cards())

    assert excinfo.value.url.startswith(ENDPOINT)
    assert excinfo.value.reason


@responses.activate
def test_failure_on_a_later_page_is_fatal(provider, make_raw_card, make_page):
    responses.get(
        ENDPOINT, json=make_page([make_raw_card()], 2), match=[page_matcher(1)]
    )
    responses.get(ENDPOINT, status=500, match=[page_matcher(2)])

    with pytest.raises(TransportFailure):
        list(provider.iterate_raw_cards())


@responses.activate
def test_page_without_pagination_is_fatal(provider):
    responses.get(ENDPOINT, json={"data": [], "meta": {}}, match=[page_matcher(1)])

    with pytest.raises(MissingRequiredField):
        list(provider.iterate_raw_cards())


@responses.activate
def test_sends_json_accept_header(provider, make_page):
    responses.get(ENDPOINT, json=make_page([], 1), match=[page_matcher(1)])

    list(provider.iterate_raw_cards())

    assert responses.calls[0].request.headers["Accept"] == "application/json"
    assert responses.calls[0].request.headers["User-Agent"].startswith("swu_data/")
