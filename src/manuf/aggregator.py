"""
Concurrent fetch of every public listing.

All listings are fetched at once on the running event loop. Results land in
a lock-guarded map keyed by URL and are only merged once every fetch has
succeeded: the first failure cancels the remaining fetches and is raised to
the caller, so there is never a partial result.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Dict, Iterable, List, Optional, TypeVar

import httpx

from .errors import DeadlineExceeded
from .fetcher import fetch_records
from .logging import get_logger
from .records import Records
from .urls import ALL_PUBLIC_LISTING_URLS

logger = get_logger(__name__)

T = TypeVar("T")


async def _with_deadline(awaitable: Awaitable[T], timeout: Optional[float], what: str) -> T:
    if timeout is None:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise DeadlineExceeded(f"{what} did not complete within {timeout:g}s") from exc


async def fetch_one(
    client: httpx.AsyncClient,
    url: str,
    timeout: Optional[float] = None,
) -> Records:
    """Fetch a single listing, bounded by ``timeout`` seconds."""
    return await _with_deadline(fetch_records(client, url), timeout, f"fetch of {url}")


class _ResultMap:
    """Per-URL results written concurrently by the fetch tasks."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._results: Dict[str, Records] = {}

    async def store(self, url: str, records: Records) -> None:
        async with self._lock:
            self._results[url] = records

    def merged(self, order: Iterable[str]) -> Records:
        merged: Records = []
        for url in order:
            merged.extend(self._results[url])
        return merged


async def _gather_all(client: httpx.AsyncClient, urls: List[str]) -> Records:
    if not urls:
        return []
    results = _ResultMap()

    async def _fetch(url: str) -> None:
        records = await fetch_records(client, url)
        await results.store(url, records)
        logger.info("Listing fetched", url=url, count=len(records))

    tasks = [asyncio.ensure_future(_fetch(url)) for url in urls]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        for task in tasks:
            if task in done and task.exception() is not None:
                exc = task.exception()
                logger.warning("Listing fetch failed", url=getattr(exc, "url", None), error=str(exc))
                raise exc
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    return results.merged(urls)


async def fetch_all(
    client: httpx.AsyncClient,
    urls: Optional[Iterable[str]] = None,
    timeout: Optional[float] = None,
) -> Records:
    """Fetch every listing concurrently and merge the results.

    Args:
        client: Shared HTTP client
        urls: Listings to fetch (default: the five IEEE registries)
        timeout: Overall deadline in seconds shared by every fetch

    Returns:
        All records, grouped by listing in the order ``urls`` names them

    Raises:
        NetworkError, RemoteError, ParseError: The first fetch failure, naming
            its URL. Sibling fetches are cancelled.
        DeadlineExceeded: If ``timeout`` elapsed first
    """
    urls = list(ALL_PUBLIC_LISTING_URLS if urls is None else urls)
    records = await _with_deadline(_gather_all(client, urls), timeout, f"fetch of {len(urls)} listings")
    logger.info("All listings fetched", sources=len(urls), count=len(records))
    return records


def sort_by_registry(records: Records) -> Records:
    """Stable sort by registry tag, for reproducible persisted output."""
    return sorted(records, key=lambda record: record.registry.value)


__all__ = ["fetch_all", "fetch_one", "sort_by_registry"]
