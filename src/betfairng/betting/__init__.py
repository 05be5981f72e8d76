"""Betting API: request builder, typed dispatcher, list operations."""

from betfairng.betting.api import (
    list_competitions,
    list_countries,
    list_event_types,
    list_events,
    list_market_book,
    list_market_catalogue,
    list_market_types,
)
from betfairng.betting.dispatch import BETTING, do_betting_request
from betfairng.betting.requests import OPERATION_DEFAULTS, build_params

__all__ = [
    "BETTING",
    "OPERATION_DEFAULTS",
    "build_params",
    "do_betting_request",
    "list_competitions",
    "list_countries",
    "list_events",
    "list_event_types",
    "list_market_book",
    "list_market_catalogue",
    "list_market_types",
]
