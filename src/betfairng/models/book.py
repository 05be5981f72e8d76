"""MarketBook - dynamic market data (prices, status, traded volume)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from betfairng.models.base import WireModel


class PriceSize(WireModel):
    """Single ladder entry (price -> size)."""

    price: float = 0.0
    size: float = 0.0


class ExchangePrices(WireModel):
    available_to_back: list[PriceSize] = Field(default_factory=list)
    available_to_lay: list[PriceSize] = Field(default_factory=list)
    traded_volume: list[PriceSize] = Field(default_factory=list)


class Runner(WireModel):
    """One selection's current tradability."""

    selection_id: int = 0
    handicap: float = 0.0
    status: str = ""  # RunnerStatus value, kept as str so new statuses still decode
    adjustment_factor: float | None = None
    last_price_traded: float = 0.0
    total_matched: float = 0.0
    removal_date: datetime | None = None
    ex: ExchangePrices | None = None

    @property
    def best_back(self) -> PriceSize | None:
        if self.ex is None or not self.ex.available_to_back:
            return None
        return self.ex.available_to_back[0]

    @property
    def best_lay(self) -> PriceSize | None:
        if self.ex is None or not self.ex.available_to_lay:
            return None
        return self.ex.available_to_lay[0]


class MarketBook(WireModel):
    market_id: str = ""
    is_market_data_delayed: bool = False
    status: str = ""
    bet_delay: int = 0
    bsp_reconciled: bool = False
    complete: bool = False
    inplay: bool = False
    number_of_winners: int = 0
    number_of_runners: int = 0
    number_of_active_runners: int = 0
    last_match_time: datetime | None = None
    total_matched: float = 0.0
    total_available: float = 0.0
    cross_matching: bool = False
    runners_voidable: bool = False
    version: int = 0
    runners: list[Runner] = Field(default_factory=list)
