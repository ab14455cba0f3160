# noqa: D401
"""Local snapshot of the OUI listings with a time based refresh policy.

Policy, evaluated on every :meth:`RecordsCache.load_or_refresh` call:

- no snapshot yet: fetch the consolidated mirror (one request) and store it
- snapshot older than ``max_age``: fetch all five IEEE listings, store the
  merged result over the old snapshot
- otherwise: read the snapshot, no network access

The snapshot is only replaced after a refresh fully succeeds. Disk access
runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

import httpx

from .aggregator import fetch_all, fetch_one
from .codec import read_file, write_file
from .errors import ManufError, StorageError
from .http import http_client
from .logging import get_logger
from .records import Records
from .urls import ALL_PUBLIC_LISTING_URLS, RAW_GITHUB_URL

logger = get_logger(__name__)

DEFAULT_MAX_AGE_SECONDS = 30 * 24 * 60 * 60
DEFAULT_TIMEOUT_SECONDS = 5 * 60


class RecordsCache:
    """Manages the on-disk record snapshot.

    Args:
        path: Snapshot file location
        client: HTTP client used for refreshes
        max_age_seconds: Freshness threshold (default: 30 days)
        timeout_seconds: Deadline for one refresh (default: 5 minutes)
        mirror_url: Consolidated listing used to bootstrap a missing snapshot
        listing_urls: Authoritative listings used to renew a stale snapshot
        serve_stale_on_error: Return the stale snapshot, with a warning, when
            renewing it fails instead of raising
        clock: Current time as a POSIX timestamp
    """

    def __init__(
        self,
        path: Union[str, Path],
        client: httpx.AsyncClient,
        max_age_seconds: float = DEFAULT_MAX_AGE_SECONDS,
        timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        mirror_url: str = RAW_GITHUB_URL,
        listing_urls: Optional[Iterable[str]] = None,
        serve_stale_on_error: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = Path(path)
        self.client = client
        self.max_age_seconds = max_age_seconds
        self.timeout_seconds = timeout_seconds
        self.mirror_url = mirror_url
        self.listing_urls: List[str] = list(
            ALL_PUBLIC_LISTING_URLS if listing_urls is None else listing_urls
        )
        self.serve_stale_on_error = serve_stale_on_error
        self._clock = clock

    def age(self) -> Optional[float]:
        """Snapshot age in seconds, or None when there is no snapshot."""
        try:
            mtime = self.path.stat().st_mtime
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"failed to check previous cache: {exc}", path=str(self.path)) from exc
        return self._clock() - mtime

    def is_fresh(self) -> bool:
        age = self.age()
        return age is not None and age <= self.max_age_seconds

    async def load_or_refresh(self) -> Records:
        """Return current records, refreshing the snapshot if required."""
        age = self.age()

        if age is None:
            logger.info("No cache found, creating", path=str(self.path), source=self.mirror_url)
            records = await fetch_one(self.client, self.mirror_url, self.timeout_seconds)
            await asyncio.to_thread(write_file, records, self.path)
            return records

        if age > self.max_age_seconds:
            logger.info(
                "Cached records are stale, renewing",
                path=str(self.path),
                age_days=round(age / 86400, 1),
            )
            try:
                records = await fetch_all(self.client, self.listing_urls, self.timeout_seconds)
                await asyncio.to_thread(write_file, records, self.path)
            except ManufError as exc:
                if not self.serve_stale_on_error:
                    raise
                logger.warning("Refresh failed, serving stale records", path=str(self.path), error=str(exc))
                return await asyncio.to_thread(read_file, self.path)
            return records

        logger.debug("Using cached records", path=str(self.path))
        return await asyncio.to_thread(read_file, self.path)

    async def refresh(self) -> Records:
        """Renew the snapshot from every listing regardless of its age."""
        records = await fetch_all(self.client, self.listing_urls, self.timeout_seconds)
        await asyncio.to_thread(write_file, records, self.path)
        return records


async def load_or_refresh(
    cache_path: Union[str, Path],
    timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
    **options,
) -> Records:
    """Convenience wrapper owning its own HTTP client.

    Extra keyword arguments are passed to :class:`RecordsCache`.
    """
    async with http_client() as client:
        cache = RecordsCache(cache_path, client, timeout_seconds=timeout_seconds, **options)
        return await cache.load_or_refresh()


__all__ = ["RecordsCache", "load_or_refresh"]
