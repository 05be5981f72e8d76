"""Request builder: fixed projections, sparse encoding, filter normalization."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from betfairng.betting.requests import OPERATION_DEFAULTS, build_params
from betfairng.models import MarketFilter, MatchProjection, PriceData, TimeRange


def wire(params) -> dict:
    return json.loads(params.to_wire())


def test_market_book_fixed_fields_and_no_filter():
    body = wire(build_params("listMarketBook", market_ids=["1.123456"]))
    assert body == {
        "marketIds": ["1.123456"],
        "priceProjection": {"priceData": ["EX_BEST_OFFERS"]},
        "matchProjection": "NO_ROLLUP",
    }


def test_market_book_ignores_filter():
    params = build_params("listMarketBook", MarketFilter(text_query="x"), market_ids=["1.1"])
    assert params.filter is None
    assert params.price_projection.price_data == [PriceData.EX_BEST_OFFERS]
    assert params.match_projection is MatchProjection.NO_ROLLUP


@pytest.mark.parametrize(
    "flt",
    [None, MarketFilter(), MarketFilter(event_type_ids=["1"], market_countries=["GB"])],
)
def test_catalogue_projection_always_present(flt):
    body = wire(build_params("listMarketCatalogue", flt, max_results=10))
    assert body["marketProjection"] == [
        "RUNNER_METADATA",
        "EVENT",
        "MARKET_START_TIME",
        "MARKET_DESCRIPTION",
    ]
    assert body["maxResults"] == 10


def test_build_is_idempotent_and_unshared():
    flt = MarketFilter(event_type_ids=["7"])
    p1 = build_params("listMarketCatalogue", flt)
    p2 = build_params("listMarketCatalogue", flt)
    assert p1 == p2
    assert p1.market_projection is not p2.market_projection
    # defaults table is untouched
    assert OPERATION_DEFAULTS["listMarketCatalogue"]["market_projection"][0] == "RUNNER_METADATA"


def test_sparse_filter_only_set_fields():
    body = wire(build_params("listEvents", MarketFilter(event_type_ids=["1"], text_query="cup")))
    assert body == {"filter": {"eventTypeIds": ["1"], "textQuery": "cup"}}


def test_none_and_empty_filter_serialize_identically():
    a = build_params("listEventTypes", None).to_wire()
    b = build_params("listEventTypes", MarketFilter()).to_wire()
    assert a == b == '{"filter":{}}'


def test_explicit_zero_max_results_is_kept():
    body = wire(build_params("listMarketCatalogue", max_results=0))
    assert body["maxResults"] == 0
    body = wire(build_params("listMarketCatalogue"))
    assert "maxResults" not in body


def test_explicit_empty_list_is_kept():
    body = wire(build_params("listEvents", MarketFilter(market_countries=[])))
    assert body["filter"] == {"marketCountries": []}


def test_time_range_uses_from_key():
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    flt = MarketFilter(market_start_time=TimeRange(from_=start))
    body = wire(build_params("listEvents", flt))
    assert body["filter"]["marketStartTime"] == {"from": "2024-01-01T00:00:00Z"}


def test_builder_never_sets_locale():
    for op in OPERATION_DEFAULTS:
        assert build_params(op).locale is None


def test_unknown_operation():
    with pytest.raises(ValueError, match="placeOrders"):
        build_params("placeOrders")


def test_time_range_rejects_naive_datetime():
    with pytest.raises(ValidationError):
        TimeRange(to=datetime(2024, 1, 1))
