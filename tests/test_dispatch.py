"""Typed dispatcher: locale stamping, error taxonomy, wire scenario."""

import pytest

from betfairng.betting.api import list_event_types, list_market_book
from betfairng.betting.dispatch import do_betting_request
from betfairng.betting.requests import build_params
from betfairng.errors import DeserializationError, SerializationError, TransportError
from betfairng.models import EventTypeResult, Params
from betfairng.session import Session


def test_locale_stamped_from_session(session, transport):
    list_event_types(session)
    assert '"locale":"en"' in transport.calls[0][2].decode()


def test_session_is_only_locale_source(transport):
    session = Session(locale="it", transport=transport)
    params = build_params("listEventTypes").model_copy(update={"locale": "fr"})
    do_betting_request(session, "listEventTypes", params, list[EventTypeResult])
    assert transport.last_body["locale"] == "it"

    session.locale = None
    do_betting_request(session, "listEventTypes", params, list[EventTypeResult])
    assert "locale" not in transport.last_body


def test_dispatch_does_not_mutate_params(session):
    params = build_params("listEventTypes")
    do_betting_request(session, "listEventTypes", params, list[EventTypeResult])
    assert params.locale is None


def test_market_book_scenario(session, transport):
    list_market_book(session, ["1.123456"])
    service_group, method, body = transport.calls[0]
    text = body.decode()
    assert service_group == "betting"
    assert method == "listMarketBook"
    assert '"marketIds":["1.123456"]' in text
    assert '"priceProjection":{"priceData":["EX_BEST_OFFERS"]}' in text
    assert '"matchProjection":"NO_ROLLUP"' in text
    assert '"filter"' not in text


def test_transport_error_passes_through_unchanged(make_session):
    err = TransportError("connection reset")
    session = make_session(error=err)
    results = ["untouched"]
    with pytest.raises(TransportError) as exc:
        results = list_event_types(session)
    assert exc.value is err
    assert results == ["untouched"]


def test_foreign_transport_exception_is_not_wrapped(make_session):
    err = ConnectionError("refused")
    session = make_session(error=err)
    with pytest.raises(ConnectionError) as exc:
        list_market_book(session, ["1.1"])
    assert exc.value is err


@pytest.mark.parametrize("body", [b'[{"eventType":{"id":"1"', b"", b"not json"])
def test_malformed_response_is_deserialization_error(make_session, body):
    session = make_session(response=body)
    with pytest.raises(DeserializationError) as exc:
        list_event_types(session)
    assert not isinstance(exc.value, TransportError)
    assert exc.value.__cause__ is not None


def test_wrong_shape_is_deserialization_error(make_session):
    session = make_session(response=b'{"eventType":{}}')
    with pytest.raises(DeserializationError):
        list_event_types(session)


def test_serialization_failure_before_transport(session, transport):
    bad = Params.model_construct(market_ids=[object()])
    with pytest.raises(SerializationError):
        do_betting_request(session, "listMarketBook", bad, list[EventTypeResult])
    assert transport.calls == []


def test_decodes_into_requested_type(make_session):
    body = b'[{"eventType":{"id":"1","name":"Soccer"},"marketCount":42,"extra":true}]'
    session = make_session(response=body)
    (result,) = list_event_types(session)
    assert isinstance(result, EventTypeResult)
    assert result.event_type.name == "Soccer"
