"""Request builder - per-operation Params assembly.

Fixed per-operation projections live in OPERATION_DEFAULTS so every pinned
constant is visible in one place. The builder never touches the locale; that
is stamped by the dispatcher from the session.
"""

from __future__ import annotations

from typing import Any

from betfairng.models import MarketFilter, Params

LIST_COMPETITIONS = "listCompetitions"
LIST_COUNTRIES = "listCountries"
LIST_EVENTS = "listEvents"
LIST_EVENT_TYPES = "listEventTypes"
LIST_MARKET_BOOK = "listMarketBook"
LIST_MARKET_CATALOGUE = "listMarketCatalogue"
LIST_MARKET_TYPES = "listMarketTypes"

# Raw (unvalidated) overrides: Params validation builds fresh lists/models from
# these on every call, so built envelopes never share mutable state.
OPERATION_DEFAULTS: dict[str, dict[str, Any]] = {
    LIST_COMPETITIONS: {},
    LIST_COUNTRIES: {},
    LIST_EVENTS: {},
    LIST_EVENT_TYPES: {},
    LIST_MARKET_BOOK: {
        "price_projection": {"price_data": ("EX_BEST_OFFERS",)},
        "match_projection": "NO_ROLLUP",
    },
    LIST_MARKET_CATALOGUE: {
        "market_projection": (
            "RUNNER_METADATA",
            "EVENT",
            "MARKET_START_TIME",
            "MARKET_DESCRIPTION",
        ),
    },
    LIST_MARKET_TYPES: {},
}

# Operations whose request carries a MarketFilter. The API requires the filter
# member for these, so a missing filter is sent as an empty one.
FILTER_OPERATIONS = frozenset(
    {
        LIST_COMPETITIONS,
        LIST_COUNTRIES,
        LIST_EVENTS,
        LIST_EVENT_TYPES,
        LIST_MARKET_CATALOGUE,
        LIST_MARKET_TYPES,
    }
)


def build_params(
    operation: str,
    filter: MarketFilter | None = None,
    market_ids: list[str] | None = None,
    max_results: int | None = None,
) -> Params:
    """Return a new Params for ``operation`` with its fixed projections applied."""
    try:
        defaults = OPERATION_DEFAULTS[operation]
    except KeyError:
        raise ValueError(f"unknown betting operation: {operation!r}") from None
    fields: dict[str, Any] = {}
    if operation in FILTER_OPERATIONS:
        fields["filter"] = filter if filter is not None else MarketFilter()
    if market_ids is not None:
        fields["market_ids"] = list(market_ids)
    if max_results is not None:
        fields["max_results"] = max_results
    fields.update(defaults)
    return Params(**fields)
