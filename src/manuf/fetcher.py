"""Fetch OUI records from a single public listing URL."""

from __future__ import annotations

import asyncio

import httpx

from .codec import decode
from .errors import NetworkError, ParseError, RemoteError
from .logging import get_logger
from .records import Records

logger = get_logger(__name__)


async def fetch_records(client: httpx.AsyncClient, url: str) -> Records:
    """GET ``url`` and decode its CSV body.

    The response is read inside ``client.stream`` so the connection is
    released on every exit path.

    Args:
        client: Shared HTTP client
        url: Listing to fetch

    Returns:
        Records in the order the listing serves them

    Raises:
        NetworkError: If sending the request or reading its body failed
            (connection, timeout, redirect loop, undecodable body)
        RemoteError: If the response status is not 200
        ParseError: If the body is not valid listing CSV
    """
    try:
        async with client.stream("GET", url) as response:
            if response.status_code != httpx.codes.OK:
                raise RemoteError(response.status_code, response.reason_phrase or None, url=url)
            body = await response.aread()
    except httpx.RequestError as exc:
        raise NetworkError(f"failed to make HTTP request: {exc}", url=url) from exc

    try:
        records = await asyncio.to_thread(decode, body)
    except ParseError as exc:
        exc.url = url
        raise

    logger.debug("Fetched records", url=url, count=len(records), size_bytes=len(body))
    return records


__all__ = ["fetch_records"]
