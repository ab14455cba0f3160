# noqa: D104
"""Pytest fixtures for manuf tests."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable, Dict, List, Union

import httpx
import pytest

from manuf.records import Record, Registry
from manuf.urls import (
    ALL_PUBLIC_LISTING_URLS,
    CID_URL,
    IAB_URL,
    MAM_URL,
    OUI36_URL,
    OUI_URL,
    RAW_GITHUB_URL,
)

HEADER_LINE = "Registry,Assignment,Organization Name,Organization Address\n"

LISTING_BODIES: Dict[str, str] = {
    OUI_URL: HEADER_LINE
    + "MA-L,002272,American Micro-Fuel Device Corp.,2181 Buchanan Loop Ferndale WA US 98248 \n"
    + 'MA-L,00D0EF,"IGT, Inc.","9295 Prototype Drive Reno NV US 89511 "\n',
    CID_URL: HEADER_LINE + "CID,0A4D2F,Example CID Holder,\n",
    IAB_URL: HEADER_LINE + "IAB,0050C2DD6,Transas Marine Limited,10 Eastgate Way Cork IE \n",
    MAM_URL: HEADER_LINE + "MA-M,D0D94F1,Beijing Example Technology Co.,Haidian Beijing CN \n",
    OUI36_URL: HEADER_LINE + "MA-S,70B3D5F2F,\"Acme \"\"Sensors\"\" Ltd\",Somewhere GB \n",
}

MIRROR_BODY = HEADER_LINE + "MA-L,B827EB,Raspberry Pi Foundation,Cambridge GB\n"

Body = Union[str, bytes, int]
Handler = Callable[[httpx.Request], httpx.Response]


class FakeListings:
    """MockTransport handler serving canned listing bodies.

    Values in ``routes`` are a CSV body, or an int status code to answer
    with an empty error response. Unknown URLs answer 404.
    """

    def __init__(self, routes: Dict[str, Body], delays: Dict[str, float] = None) -> None:
        self.routes = dict(routes)
        self.delays = dict(delays or {})
        self.requested: List[str] = []
        self.cancelled: List[str] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        delay = self.delays.get(url)
        if delay:
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.cancelled.append(url)
                raise
        body = self.routes.get(url, 404)
        if isinstance(body, int):
            return httpx.Response(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        return httpx.Response(200, content=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def listings() -> FakeListings:
    """All five IEEE listings plus the mirror, every one healthy."""
    routes: Dict[str, Body] = dict(LISTING_BODIES)
    routes[RAW_GITHUB_URL] = MIRROR_BODY
    return FakeListings(routes)


@pytest.fixture
def sample_records() -> List[Record]:
    return [
        Record(Registry.MA_L, "002272", "American Micro-Fuel Device Corp.", "2181 Buchanan Loop"),
        Record(Registry.MA_L, "00D0EF", "IGT, Inc.", "9295 Prototype Drive"),
        Record(Registry.MA_S, "70B3D5F2F", 'Acme "Sensors" Ltd', ""),
        Record(Registry.CID, "0A4D2F", "Line\nBreak Org", "Multi, Part, Address"),
    ]


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "manuf.csv"


@pytest.fixture
def listing_urls() -> List[str]:
    return list(ALL_PUBLIC_LISTING_URLS)
