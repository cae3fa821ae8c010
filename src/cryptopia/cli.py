"""Typer-based CLI for querying the Cryptopia API."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import typer
from rich.console import Console

from .api.client import CryptopiaClient
from .api.errors import CryptopiaError


def _load_settings(config_path: Optional[Path] = None):
    from .config import load_settings
    return load_settings(config_path)

def _create_client(settings) -> CryptopiaClient:
    from .api.factory import create_client_from_settings
    return create_client_from_settings(settings)

def _configure_logging(log_dir: Path | None = None):
    from .logging import configure_logging
    return configure_logging(log_dir)

app = typer.Typer(help="Cryptopia exchange API client CLI")
console = Console()
logger = logging.getLogger(__name__)

ConfigOption = typer.Option(None, help="Path to config file")


def run_cli(argv: list[str] | None = None) -> None:
    """Run CLI with optional argv parameter."""
    app(argv)


async def _with_client(config: Optional[Path], call: Callable[[CryptopiaClient], Awaitable[Any]]) -> Any:
    settings = _load_settings(config)
    client = _create_client(settings)
    try:
        return await call(client)
    finally:
        await client.close()


def _run(config: Optional[Path], call: Callable[[CryptopiaClient], Awaitable[Any]]) -> None:
    """Run one API call and print its JSON result."""
    _configure_logging()
    try:
        result = asyncio.run(_with_client(config, call))
    except (CryptopiaError, ValueError) as e:
        logger.debug("Request failed", exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print_json(json.dumps(result, default=str))


@app.command()
def currencies(config: Optional[Path] = ConfigOption) -> None:
    """List all currencies."""
    _run(config, lambda client: client.get_currencies())


@app.command()
def ticker(
    pair: str = typer.Argument(..., help="Trade pair, e.g. DOT_BTC"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Show market summary for a pair."""
    _run(config, lambda client: client.get_ticker(pair))


@app.command()
def orderbook(
    pair: str = typer.Argument(..., help="Trade pair, e.g. DOT_BTC"),
    limit: Optional[int] = typer.Option(None, help="Number of orders per side (default 1000)"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Show open orders for a pair."""
    _run(config, lambda client: client.get_order_book(pair, limit))


@app.command()
def trades(
    pair: str = typer.Argument(..., help="Trade pair, e.g. DOT_BTC"),
    hours: Optional[int] = typer.Option(None, help="History window in hours (default 24)"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Show recent trades for a pair."""
    _run(config, lambda client: client.get_trades(pair, hours))


@app.command()
def balance(config: Optional[Path] = ConfigOption) -> None:
    """Show account balances. Requires credentials."""
    _run(config, lambda client: client.get_balance())


@app.command()
def cancel_order(
    symbol: str = typer.Argument(..., help="Market symbol"),
    order_id: str = typer.Argument(..., help="Order ID to cancel"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Cancel an open order. Requires credentials."""
    _run(config, lambda client: client.cancel_order(symbol, order_id))


@app.command()
def show_config(config: Optional[Path] = ConfigOption) -> None:
    """Print the effective configuration with secrets redacted."""
    try:
        settings = _load_settings(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print_json(json.dumps(settings.redacted()))


def main():
    """CLI main entry point."""
    app()


if __name__ == "__main__":
    main()
