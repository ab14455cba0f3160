"""Command-line interface for the manuf OUI index."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from .aggregator import fetch_all, sort_by_registry
from .cache import RecordsCache
from .codec import read_file, write_file
from .config import Settings, get_settings
from .errors import ManufError
from .http import http_client
from .logging import configure_logging, get_logger
from .matcher import UNKNOWN, Matcher, MatchStrategy
from .records import Records

err_console = Console(stderr=True)
app = typer.Typer(help="Look up hardware address manufacturers from the IEEE OUI listings.")

logger = get_logger(__name__)


def _settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return get_settings()


def _fail(msg: str, exc: Exception) -> None:
    err_console.print(f"[red]{msg}: {exc}", highlight=False)
    raise typer.Exit(1) from exc


async def _load_records(settings: Settings, force_refresh: bool = False) -> Records:
    async with http_client(
        timeout=settings.request_timeout_seconds,
        user_agent=settings.user_agent or None,
    ) as client:
        cache = RecordsCache(
            settings.cache_path,
            client,
            max_age_seconds=settings.max_age_seconds,
            timeout_seconds=settings.timeout_seconds,
            mirror_url=settings.mirror_url,
            listing_urls=settings.listing_urls,
            serve_stale_on_error=settings.serve_stale_on_error,
        )
        if force_refresh:
            return await cache.refresh()
        return await cache.load_or_refresh()


async def _fetch_sorted(settings: Settings) -> Records:
    async with http_client(
        timeout=settings.request_timeout_seconds,
        user_agent=settings.user_agent or None,
    ) as client:
        records = await fetch_all(client, settings.listing_urls, settings.timeout_seconds)
    return sort_by_registry(records)


@app.callback()
def main(
    ctx: typer.Context,
    cache_path: Optional[Path] = typer.Option(
        None,
        "--cache-path",
        "-c",
        help="Record cache file (default: manuf.csv in the user cache directory).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Diagnostics level written to stderr (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Look up hardware address manufacturers from the IEEE OUI listings."""

    settings = get_settings()
    updates = {}
    if cache_path is not None:
        updates["cache_path"] = cache_path
    if log_level is not None:
        updates["log_level"] = log_level
    if updates:
        settings = settings.model_copy(update=updates)
    configure_logging(settings.log_level, force=True)
    ctx.obj = settings


@app.command()
def dump(
    ctx: typer.Context,
    force_refresh: bool = typer.Option(
        False,
        "--refresh",
        help="Renew the cache from every IEEE listing regardless of its age.",
    ),
) -> None:
    """Print every record as one JSON object per line."""

    settings = _settings(ctx)
    try:
        records = asyncio.run(_load_records(settings, force_refresh))
    except ManufError as exc:
        _fail("failed to load records", exc)

    for record in records:
        typer.echo(json.dumps(record.to_dict()))


@app.command()
def generate(
    ctx: typer.Context,
    output: Path = typer.Option(Path("manuf.csv"), "--output", "-o", help="Destination CSV file."),
) -> None:
    """Rebuild the consolidated CSV from every IEEE listing."""

    settings = _settings(ctx)
    try:
        records = asyncio.run(_fetch_sorted(settings))
    except ManufError as exc:
        _fail("failed to get all records", exc)

    try:
        write_file(records, output)
    except ManufError as exc:
        _fail(f"failed to write records to {output}", exc)

    err_console.print(f"Wrote {len(records)} records to {output}", highlight=False)


@app.command()
def lookup(
    ctx: typer.Context,
    addresses: List[str] = typer.Argument(..., help="Hardware addresses, any separator style."),
    strategy: Optional[MatchStrategy] = typer.Option(
        None,
        "--strategy",
        "-s",
        case_sensitive=False,
        help="first: first matching record wins; longest: most specific prefix wins.",
    ),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 if any address is unknown."),
) -> None:
    """Print the manufacturer of each address."""

    settings = _settings(ctx)
    try:
        records = asyncio.run(_load_records(settings))
    except ManufError as exc:
        _fail("failed to load records", exc)

    matcher = Matcher(records, strategy or settings.match_strategy)
    missing = 0
    for address in addresses:
        name = matcher.lookup(address)
        if name == UNKNOWN:
            missing += 1
        typer.echo(f"{address}\t{name}")

    if strict and missing:
        raise typer.Exit(1)


@app.command()
def sniff(
    ctx: typer.Context,
    interface: Optional[str] = typer.Option(
        None,
        "--interface",
        "-i",
        help="Network interface to listen on (default: scapy's default interface).",
    ),
    strategy: Optional[MatchStrategy] = typer.Option(
        None,
        "--strategy",
        "-s",
        case_sensitive=False,
        help="first: first matching record wins; longest: most specific prefix wins.",
    ),
    count: int = typer.Option(0, "--count", "-n", min=0, help="Stop after N packets (0: forever)."),
) -> None:
    """Annotate live Ethernet traffic with manufacturer names."""

    from .sniff import capture

    settings = _settings(ctx)
    try:
        records = read_file(settings.cache_path)
    except ManufError as exc:
        _fail("failed to read records from cache (run `manuf dump` first)", exc)

    matcher = Matcher(records, strategy or settings.match_strategy)
    try:
        capture(matcher, typer.echo, interface=interface, count=count)
    except OSError as exc:
        _fail(f"failed to open {interface or 'default interface'} for listening", exc)
    except KeyboardInterrupt:
        logger.info("Capture interrupted")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
