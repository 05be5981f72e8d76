"""Request-side records: MarketFilter, TimeRange, PriceProjection, Params.

Every field is optional. ``None`` means "not set" and is dropped from the wire
encoding; an explicit zero or empty list is kept.
"""

from __future__ import annotations

from pydantic import AwareDatetime, Field

from betfairng.models.base import WireModel
from betfairng.models.enums import MarketProjection, MatchProjection, OrderProjection, PriceData


class TimeRange(WireModel):
    """Interval of instants; either bound may be open. Bounds must carry a timezone."""

    from_: AwareDatetime | None = Field(None, alias="from")
    to: AwareDatetime | None = None


class MarketFilter(WireModel):
    """Sparse market query. The remote service is the only validator."""

    text_query: str | None = None
    exchange_ids: list[str] | None = None
    event_type_ids: list[str] | None = None
    event_ids: list[str] | None = None
    competition_ids: list[str] | None = None
    market_ids: list[str] | None = None
    venues: list[str] | None = None
    bsp_only: bool | None = None
    turn_in_play_enabled: bool | None = None
    in_play_only: bool | None = None
    market_betting_types: list[str] | None = None
    market_countries: list[str] | None = None
    market_type_codes: list[str] | None = None
    market_start_time: TimeRange | None = None
    with_orders: list[str] | None = None


class PriceProjection(WireModel):
    """Which price fields a market book snapshot should carry."""

    price_data: list[PriceData] | None = None
    virtualise: bool | None = None
    rollover_stakes: bool | None = None


class Params(WireModel):
    """Envelope for one betting call."""

    filter: MarketFilter | None = None
    market_ids: list[str] | None = None
    price_projection: PriceProjection | None = None
    max_results: int | None = None
    locale: str | None = None
    market_projection: list[MarketProjection] | None = None
    order_projection: OrderProjection | None = None
    match_projection: MatchProjection | None = None

    def to_wire(self) -> str:
        """Sparse JSON body: unset fields are omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
