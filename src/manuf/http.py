"""Standard HTTP client helpers for the public listing sources."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

import httpx

from . import __version__

DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_USER_AGENT = f"manuf/{__version__}"


def _build_headers(user_agent: Optional[str]) -> Dict[str, str]:
    return {"User-Agent": user_agent or DEFAULT_USER_AGENT, "Accept": "text/csv, */*"}


@asynccontextmanager
async def http_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Provide a configured async HTTP client.

    ``timeout`` bounds each individual request; the overall deadline of a
    fetch is enforced by the caller.
    """

    headers = _build_headers(user_agent)
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers=headers,
        follow_redirects=True,
        transport=transport,
    ) as client:
        yield client


__all__ = ["http_client"]
