"""Read-only account inspection from the terminal.

Usage:
    python -m scripts.show_account
    python -m scripts.show_account --account 101-004-1234567-001
    python -m scripts.show_account --account 101-004-1234567-001 -i EUR_USD -i USD_JPY
"""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.table import Table

from config.settings import get_settings
from oanda.api import APIClient
from oanda.factory import build_client
from observability.logger import setup_logging
from observability.metrics import RequestMetrics

console = Console()


def render_accounts(payload: dict | None) -> Table:
    table = Table(title="Accounts")
    table.add_column("ID", style="cyan")
    table.add_column("Tags")
    for acct in (payload or {}).get("accounts", []):
        table.add_row(acct.get("id", ""), ", ".join(acct.get("tags", [])))
    return table


def render_summary(payload: dict | None) -> Table:
    acct = (payload or {}).get("account", {})
    table = Table(title=f"Account {acct.get('id', '?')}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    for field in ("alias", "currency", "balance", "NAV", "unrealizedPL",
                  "marginUsed", "marginAvailable", "openTradeCount", "pendingOrderCount"):
        if field in acct:
            table.add_row(field, str(acct[field]))
    return table


def render_positions(payload: dict | None) -> Table:
    table = Table(title="Open positions")
    table.add_column("Instrument", style="cyan")
    table.add_column("Long", justify="right")
    table.add_column("Short", justify="right")
    table.add_column("Unrealized P/L", justify="right")
    for pos in (payload or {}).get("positions", []):
        table.add_row(
            pos.get("instrument", ""),
            pos.get("long", {}).get("units", "0"),
            pos.get("short", {}).get("units", "0"),
            pos.get("unrealizedPL", ""),
        )
    return table


def render_pricing(payload: dict | None) -> Table:
    table = Table(title="Pricing")
    table.add_column("Instrument", style="cyan")
    table.add_column("Bid", justify="right")
    table.add_column("Ask", justify="right")
    table.add_column("Tradeable")
    for price in (payload or {}).get("prices", []):
        bids = price.get("bids") or [{}]
        asks = price.get("asks") or [{}]
        table.add_row(
            price.get("instrument", ""),
            bids[0].get("price", ""),
            asks[0].get("price", ""),
            "yes" if price.get("tradeable") else "no",
        )
    return table


def show(client: APIClient, account_id: str, instruments: tuple[str, ...]) -> None:
    if not account_id:
        console.print(render_accounts(client.get_accounts()))
        return

    console.print(render_summary(client.get_account_summary(account_id)))
    console.print(render_positions(client.get_open_positions(account_id)))
    if instruments:
        console.print(render_pricing(client.get_pricing(account_id, list(instruments))))


@click.command()
@click.option("--account", "account_id", default=None, help="Account ID (default: OANDA_ACCOUNT_ID).")
@click.option("--instrument", "-i", "instruments", multiple=True, help="Instrument to price, repeatable.")
def main(account_id: str | None, instruments: tuple[str, ...]) -> None:
    settings = get_settings()
    setup_logging(level=settings.log_level, fmt="console")

    if not settings.oanda_api_key.get_secret_value():
        console.print("[bold red]OANDA_API_KEY is not set.[/bold red]")
        sys.exit(1)

    metrics = RequestMetrics()
    client = build_client(settings, metrics=metrics)
    show(client, account_id or settings.oanda_account_id, instruments)

    summary = metrics.summary()
    console.print(
        f"[dim]{summary['total_requests']} requests, "
        f"{summary['failed_requests']} failed, "
        f"avg {summary['avg_latency_ms']} ms[/dim]"
    )


if __name__ == "__main__":
    main()
