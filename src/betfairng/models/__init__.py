"""Wire records (Pydantic) - request params and typed results."""

from betfairng.models.book import ExchangePrices, MarketBook, PriceSize, Runner
from betfairng.models.catalogue import MarketCatalogue, MarketDescription, RunnerCatalog
from betfairng.models.enums import (
    MarketProjection,
    MatchProjection,
    OrderProjection,
    PriceData,
    RunnerStatus,
)
from betfairng.models.params import MarketFilter, Params, PriceProjection, TimeRange
from betfairng.models.results import (
    Competition,
    CompetitionResult,
    CountryCodeResult,
    Event,
    EventResult,
    EventType,
    EventTypeResult,
    MarketTypeResult,
)

__all__ = [
    "TimeRange",
    "MarketFilter",
    "PriceProjection",
    "Params",
    "PriceData",
    "MarketProjection",
    "OrderProjection",
    "MatchProjection",
    "RunnerStatus",
    "EventType",
    "EventTypeResult",
    "Competition",
    "CompetitionResult",
    "CountryCodeResult",
    "Event",
    "EventResult",
    "MarketTypeResult",
    "MarketBook",
    "Runner",
    "ExchangePrices",
    "PriceSize",
    "MarketCatalogue",
    "MarketDescription",
    "RunnerCatalog",
]
