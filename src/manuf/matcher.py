"""
Hardware address to organization lookup.

Two strategies are available and callers pick one explicitly:

- ``FIRST``: linear scan, the first record whose assignment prefixes the
  address wins. Results depend on collection order, so an MA-L entry placed
  before a more specific MA-M entry under the same OUI shadows it.
- ``LONGEST``: the most specific matching assignment wins.
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Iterable, Optional, Sequence

from .records import Record, normalize_assignment

UNKNOWN = "?"


class MatchStrategy(str, Enum):
    """How to choose among several matching assignments."""
    FIRST = "first"
    LONGEST = "longest"


def normalize_address(address: str) -> str:
    """Strip separators and uppercase, e.g. ``aa-bb-cc-dd-ee-ff`` -> ``AABBCCDDEEFF``."""
    return normalize_assignment(address)


def find_record(
    records: Iterable[Record],
    address: str,
    strategy: MatchStrategy = MatchStrategy.FIRST,
) -> Optional[Record]:
    """Return the record whose assignment prefixes ``address``, if any."""
    key = normalize_address(address)
    if not key:
        return None

    best: Optional[Record] = None
    for record in records:
        if not record.assignment or not key.startswith(record.assignment):
            continue
        if strategy is MatchStrategy.FIRST:
            return record
        if best is None or len(record.assignment) > len(best.assignment):
            best = record
    return best


def find(
    records: Iterable[Record],
    address: str,
    strategy: MatchStrategy = MatchStrategy.FIRST,
) -> Optional[str]:
    """Organization name for ``address`` or None when nothing matches."""
    record = find_record(records, address, strategy)
    if record is None:
        return None
    return record.organization_name


def lookup(
    records: Iterable[Record],
    address: str,
    strategy: MatchStrategy = MatchStrategy.FIRST,
    default: str = UNKNOWN,
) -> str:
    name = find(records, address, strategy)
    return default if name is None else name


class Matcher:
    """Records bound to a strategy, with memoized lookups.

    Meant for hot paths such as the packet sniffer, where the same handful
    of addresses is looked up over and over.
    """

    def __init__(
        self,
        records: Sequence[Record],
        strategy: MatchStrategy = MatchStrategy.FIRST,
        cache_size: int = 4096,
    ) -> None:
        self.records = records
        self.strategy = MatchStrategy(strategy)
        self._lookup = lru_cache(maxsize=cache_size)(self._uncached_lookup)

    def _uncached_lookup(self, key: str) -> Optional[str]:
        return find(self.records, key, self.strategy)

    def find(self, address: str) -> Optional[str]:
        return self._lookup(normalize_address(address))

    def lookup(self, address: str, default: str = UNKNOWN) -> str:
        name = self.find(address)
        return default if name is None else name

    def __len__(self) -> int:
        return len(self.records)


__all__ = [
    "MatchStrategy",
    "Matcher",
    "UNKNOWN",
    "find",
    "find_record",
    "lookup",
    "normalize_address",
]
