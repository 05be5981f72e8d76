"""Betting API list operations.

Each entry point builds Params, then dispatches with its result type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from betfairng.betting.dispatch import do_betting_request
from betfairng.betting.requests import (
    LIST_COMPETITIONS,
    LIST_COUNTRIES,
    LIST_EVENT_TYPES,
    LIST_EVENTS,
    LIST_MARKET_BOOK,
    LIST_MARKET_CATALOGUE,
    LIST_MARKET_TYPES,
    build_params,
)
from betfairng.models import (
    CompetitionResult,
    CountryCodeResult,
    EventResult,
    EventTypeResult,
    MarketBook,
    MarketCatalogue,
    MarketFilter,
    MarketTypeResult,
)

if TYPE_CHECKING:
    from betfairng.session import Session


def list_competitions(
    session: Session, filter: MarketFilter | None = None
) -> list[CompetitionResult]:
    """Competitions (e.g. World Cup 2013) associated with the filtered markets."""
    params = build_params(LIST_COMPETITIONS, filter)
    return do_betting_request(session, LIST_COMPETITIONS, params, list[CompetitionResult])


def list_countries(
    session: Session, filter: MarketFilter | None = None
) -> list[CountryCodeResult]:
    """Countries associated with the filtered markets."""
    params = build_params(LIST_COUNTRIES, filter)
    return do_betting_request(session, LIST_COUNTRIES, params, list[CountryCodeResult])


def list_events(session: Session, filter: MarketFilter | None = None) -> list[EventResult]:
    """Events (e.g. Reading vs. Man United) associated with the filtered markets."""
    params = build_params(LIST_EVENTS, filter)
    return do_betting_request(session, LIST_EVENTS, params, list[EventResult])


def list_event_types(
    session: Session, filter: MarketFilter | None = None
) -> list[EventTypeResult]:
    """Event types (i.e. sports) associated with the filtered markets."""
    params = build_params(LIST_EVENT_TYPES, filter)
    return do_betting_request(session, LIST_EVENT_TYPES, params, list[EventTypeResult])


def list_market_book(session: Session, market_ids: list[str]) -> list[MarketBook]:
    """Dynamic market data: prices, market and selection status, traded volume.

    Always requests best offers with no rollup.
    """
    params = build_params(LIST_MARKET_BOOK, market_ids=market_ids)
    return do_betting_request(session, LIST_MARKET_BOOK, params, list[MarketBook])


def list_market_catalogue(
    session: Session,
    filter: MarketFilter | None = None,
    max_results: int | None = None,
) -> list[MarketCatalogue]:
    """Static market information: names, selections, description.

    Market data request limits apply on the remote side.
    """
    params = build_params(LIST_MARKET_CATALOGUE, filter, max_results=max_results)
    return do_betting_request(session, LIST_MARKET_CATALOGUE, params, list[MarketCatalogue])


def list_market_types(
    session: Session, filter: MarketFilter | None = None
) -> list[MarketTypeResult]:
    """Market types (e.g. MATCH_ODDS, NEXT_GOAL) associated with the filtered markets."""
    params = build_params(LIST_MARKET_TYPES, filter)
    return do_betting_request(session, LIST_MARKET_TYPES, params, list[MarketTypeResult])
