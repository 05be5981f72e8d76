"""Betting subcommand: list event types, competitions, events, markets."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import typer

from betfairng.betting import api
from betfairng.errors import BetfairError
from betfairng.models import MarketFilter
from betfairng.session import Session

app = typer.Typer(help="Betting API list operations")

T = TypeVar("T")


def _session(ctx: typer.Context, token: str | None) -> Session:
    session = Session.from_settings(ctx.obj["settings"])
    if token:
        session.session_token = token
    return session


def _filter(
    text: str | None,
    event_types: list[str] | None,
    countries: list[str] | None,
    events: list[str] | None,
    competitions: list[str] | None,
    market_types: list[str] | None,
) -> MarketFilter:
    return MarketFilter(
        text_query=text,
        event_type_ids=event_types or None,
        market_countries=countries or None,
        event_ids=events or None,
        competition_ids=competitions or None,
        market_type_codes=market_types or None,
    )


def _call(ctx: typer.Context, token: str | None, fn: Callable[[Session], T]) -> T:
    session = _session(ctx, token)
    try:
        return fn(session)
    except BetfairError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    finally:
        session.close()


TokenOpt = typer.Option(None, "--token", help="Session token (overrides config)")
TextOpt = typer.Option(None, "--text", help="Free text query")
EventTypeOpt = typer.Option(None, "--event-type", help="Event type id (repeatable)")
CountryOpt = typer.Option(None, "--country", help="Market country code (repeatable)")
EventOpt = typer.Option(None, "--event", help="Event id (repeatable)")
CompetitionOpt = typer.Option(None, "--competition", help="Competition id (repeatable)")
MarketTypeOpt = typer.Option(None, "--market-type", help="Market type code (repeatable)")


@app.command("event-types")
def event_types(
    ctx: typer.Context,
    token: str | None = TokenOpt,
    text: str | None = TextOpt,
    event_type: list[str] | None = EventTypeOpt,
    country: list[str] | None = CountryOpt,
    event: list[str] | None = EventOpt,
    competition: list[str] | None = CompetitionOpt,
    market_type: list[str] | None = MarketTypeOpt,
) -> None:
    """List event types (sports)."""
    flt = _filter(text, event_type, country, event, competition, market_type)
    rows = _call(ctx, token, lambda s: api.list_event_types(s, flt))
    for r in rows:
        et = r.event_type
        typer.echo(f"  {et.id if et else '':>8}  {r.market_count:>6}  {et.name if et else ''}")
    typer.echo(f"Total: {len(rows)} event types")


@app.command("competitions")
def competitions(
    ctx: typer.Context,
    token: str | None = TokenOpt,
    text: str | None = TextOpt,
    event_type: list[str] | None = EventTypeOpt,
    country: list[str] | None = CountryOpt,
    event: list[str] | None = EventOpt,
    competition: list[str] | None = CompetitionOpt,
    market_type: list[str] | None = MarketTypeOpt,
) -> None:
    """List competitions."""
    flt = _filter(text, event_type, country, event, competition, market_type)
    rows = _call(ctx, token, lambda s: api.list_competitions(s, flt))
    for r in rows:
        c = r.competition
        typer.echo(
            f"  {c.id if c else '':>10}  {r.market_count:>6}  {r.competition_region:<4}  {c.name if c else ''}"
        )
    typer.echo(f"Total: {len(rows)} competitions")


@app.command("countries")
def countries(
    ctx: typer.Context,
    token: str | None = TokenOpt,
    text: str | None = TextOpt,
    event_type: list[str] | None = EventTypeOpt,
    event: list[str] | None = EventOpt,
    competition: list[str] | None = CompetitionOpt,
    market_type: list[str] | None = MarketTypeOpt,
) -> None:
    """List country codes."""
    flt = _filter(text, event_type, None, event, competition, market_type)
    rows = _call(ctx, token, lambda s: api.list_countries(s, flt))
    for r in rows:
        typer.echo(f"  {r.country_code:<4}  {r.market_count:>6}")
    typer.echo(f"Total: {len(rows)} countries")


@app.command("events")
def events(
    ctx: typer.Context,
    token: str | None = TokenOpt,
    text: str | None = TextOpt,
    event_type: list[str] | None = EventTypeOpt,
    country: list[str] | None = CountryOpt,
    competition: list[str] | None = CompetitionOpt,
    market_type: list[str] | None = MarketTypeOpt,
) -> None:
    """List events."""
    flt = _filter(text, event_type, country, None, competition, market_type)
    rows = _call(ctx, token, lambda s: api.list_events(s, flt))
    for r in rows:
        ev = r.event
        if ev is None:
            continue
        opened = ev.open_date.isoformat() if ev.open_date else ""
        typer.echo(f"  {ev.id:>10}  {r.market_count:>4}  {opened:<25}  {ev.name[:60]}")
    typer.echo(f"Total: {len(rows)} events")


@app.command("market-types")
def market_types(
    ctx: typer.Context,
    token: str | None = TokenOpt,
    text: str | None = TextOpt,
    event_type: list[str] | None = EventTypeOpt,
    country: list[str] | None = CountryOpt,
    event: list[str] | None = EventOpt,
    competition: list[str] | None = CompetitionOpt,
) -> None:
    """List market types."""
    flt = _filter(text, event_type, country, event, competition, None)
    rows = _call(ctx, token, lambda s: api.list_market_types(s, flt))
    for r in rows:
        typer.echo(f"  {r.market_type:<30}  {r.market_count:>6}")
    typer.echo(f"Total: {len(rows)} market types")


@app.command("catalogue")
def catalogue(
    ctx: typer.Context,
    token: str | None = TokenOpt,
    max_results: int = typer.Option(100, "--max-results", "-n", help="Max markets to return"),
    text: str | None = TextOpt,
    event_type: list[str] | None = EventTypeOpt,
    country: list[str] | None = CountryOpt,
    event: list[str] | None = EventOpt,
    competition: list[str] | None = CompetitionOpt,
    market_type: list[str] | None = MarketTypeOpt,
) -> None:
    """List market catalogue entries."""
    flt = _filter(text, event_type, country, event, competition, market_type)
    rows = _call(ctx, token, lambda s: api.list_market_catalogue(s, flt, max_results))
    for m in rows:
        event_name = m.event.name if m.event else ""
        typer.echo(f"  {m.market_id:<12}  {m.market_name[:30]:<30}  {len(m.runners):>3}  {event_name[:40]}")
    typer.echo(f"Total: {len(rows)} markets")


@app.command("book")
def book(
    ctx: typer.Context,
    market_ids: list[str] = typer.Argument(..., help="Market ids, e.g. 1.123456"),
    token: str | None = TokenOpt,
) -> None:
    """Show best offers for markets."""
    rows = _call(ctx, token, lambda s: api.list_market_book(s, market_ids))
    for mb in rows:
        typer.echo(f"{mb.market_id}  {mb.status}  matched={mb.total_matched:.2f}")
        for r in mb.runners:
            back = r.best_back
            lay = r.best_lay
            back_s = f"{back.price}@{back.size:.2f}" if back else "-"
            lay_s = f"{lay.price}@{lay.size:.2f}" if lay else "-"
            typer.echo(f"  {r.selection_id:>10}  {r.status:<8}  back {back_s:<16}  lay {lay_s}")
