"""MarketCatalogue - information about a market that rarely changes."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from betfairng.models.base import WireModel
from betfairng.models.results import Competition, Event, EventType


class RunnerCatalog(WireModel):
    """Static information about a runner (selection) in a market."""

    selection_id: int = 0
    runner_name: str = ""
    handicap: float = 0.0
    sort_priority: int = 0
    metadata: dict[str, str | None] = Field(default_factory=dict)


class MarketDescription(WireModel):
    """Market definition."""

    persistence_enabled: bool = False
    bsp_market: bool = False
    market_time: datetime | None = None
    suspend_time: datetime | None = None
    settle_time: datetime | None = None
    betting_type: str = ""
    turn_in_play_enabled: bool = False
    market_type: str = ""
    regulator: str = ""
    market_base_rate: float = 0.0
    discount_allowed: bool = False
    wallet: str = ""
    rules: str = ""
    rules_has_date: bool = False
    clarifications: str = ""


class MarketCatalogue(WireModel):
    market_id: str = ""
    market_name: str = ""
    market_start_time: datetime | None = None
    description: MarketDescription | None = None
    total_matched: float | None = None
    runners: list[RunnerCatalog] = Field(default_factory=list)
    event_type: EventType | None = None
    competition: Competition | None = None
    event: Event | None = None
