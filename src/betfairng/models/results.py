"""Result records for the list operations that return entity + market count."""

from __future__ import annotations

from datetime import datetime

from betfairng.models.base import WireModel


class EventType(WireModel):
    id: str = ""
    name: str = ""


class EventTypeResult(WireModel):
    event_type: EventType | None = None
    market_count: int = 0


class Competition(WireModel):
    id: str = ""
    name: str = ""


class CompetitionResult(WireModel):
    competition: Competition | None = None
    market_count: int = 0
    competition_region: str = ""


class CountryCodeResult(WireModel):
    country_code: str = ""
    market_count: int = 0


class Event(WireModel):
    id: str = ""
    name: str = ""
    country_code: str = ""
    timezone: str = ""
    venue: str = ""
    open_date: datetime | None = None


class EventResult(WireModel):
    event: Event | None = None
    market_count: int = 0


class MarketTypeResult(WireModel):
    """Market types are the same regardless of locale."""

    market_type: str = ""
    market_count: int = 0
