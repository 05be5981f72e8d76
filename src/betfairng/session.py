"""Session - locale/credentials plus the transport used for every call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from betfairng.betting import api
from betfairng.transport import HttpTransport, Transport

if TYPE_CHECKING:
    from betfairng.config.settings import Settings
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


class Session:
    """Holds app key, session token and locale; the betting layer only reads it."""

    def __init__(
        self,
        app_key: str = "",
        session_token: str | None = None,
        locale: str | None = "en",
        transport: Transport | None = None,
    ):
        self.app_key = app_key
        self.session_token = session_token
        self.locale = locale
        self.transport: Transport = transport if transport is not None else HttpTransport()

    @classmethod
    def from_settings(cls, settings: Settings, transport: Transport | None = None) -> Session:
        if transport is None:
            transport = HttpTransport(
                endpoints={
                    "betting": settings.betting_endpoint,
                    "account": settings.account_endpoint,
                },
                identity_endpoint=settings.identity_endpoint,
                timeout=settings.timeout_sec,
            )
        return cls(
            app_key=settings.app_key,
            session_token=settings.session_token,
            locale=settings.locale,
            transport=transport,
        )

    def login(self, username: str, password: str) -> str:
        """Log in through the HTTP transport and keep the returned token."""
        if not isinstance(self.transport, HttpTransport):
            raise TypeError("login requires an HttpTransport")
        self.session_token = self.transport.login(self.app_key, username, password)
        return self.session_token

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Session:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Betting operations
    def list_competitions(self, filter: MarketFilter | None = None) -> list[CompetitionResult]:
        return api.list_competitions(self, filter)

    def list_countries(self, filter: MarketFilter | None = None) -> list[CountryCodeResult]:
        return api.list_countries(self, filter)

    def list_events(self, filter: MarketFilter | None = None) -> list[EventResult]:
        return api.list_events(self, filter)

    def list_event_types(self, filter: MarketFilter | None = None) -> list[EventTypeResult]:
        return api.list_event_types(self, filter)

    def list_market_book(self, market_ids: list[str]) -> list[MarketBook]:
        return api.list_market_book(self, market_ids)

    def list_market_catalogue(
        self, filter: MarketFilter | None = None, max_results: int | None = None
    ) -> list[MarketCatalogue]:
        return api.list_market_catalogue(self, filter, max_results)

    def list_market_types(self, filter: MarketFilter | None = None) -> list[MarketTypeResult]:
        return api.list_market_types(self, filter)
