"""Tests for hardware address matching."""

from __future__ import annotations

import pytest

from manuf.matcher import (
    UNKNOWN,
    MatchStrategy,
    Matcher,
    find,
    find_record,
    lookup,
    normalize_address,
)
from manuf.records import Record, Registry

SPECIFIC = Record(Registry.MA_M, "AABBCC", "Specific Org", "")
BROAD = Record(Registry.MA_L, "AABB", "Broad Org", "")


class TestNormalizeAddress:
    """Test address normalization."""

    @pytest.mark.parametrize(
        "address",
        ["aa-bb-cc-dd-ee-ff", "AA:BB:CC:DD:EE:FF", "aabbccddeeff", "aabb.ccdd.eeff", " aa:bb:cc:dd:ee:ff "],
    )
    def test_separator_styles_share_a_key(self, address: str) -> None:
        assert normalize_address(address) == "AABBCCDDEEFF"


class TestFirstMatch:
    """Order-dependent first-match behaviour."""

    def test_first_record_wins_even_if_less_specific(self) -> None:
        assert find([BROAD, SPECIFIC], "AA:BB:CC:DD:EE:FF") == "Broad Org"

    def test_first_record_wins_when_more_specific(self) -> None:
        assert find([SPECIFIC, BROAD], "AA:BB:CC:DD:EE:FF") == "Specific Org"

    def test_default_strategy_is_first(self) -> None:
        assert find_record([BROAD, SPECIFIC], "aabbccddeeff") is BROAD


class TestLongestMatch:
    """Most specific prefix wins regardless of order."""

    @pytest.mark.parametrize("records", [[BROAD, SPECIFIC], [SPECIFIC, BROAD]])
    def test_longest_prefix(self, records) -> None:
        assert find(records, "aa-bb-cc-dd-ee-ff", MatchStrategy.LONGEST) == "Specific Org"

    def test_ties_keep_collection_order(self) -> None:
        twin = Record(Registry.MA_L, "AABBCC", "Twin Org", "")
        assert find([SPECIFIC, twin], "AABBCC000000", MatchStrategy.LONGEST) == "Specific Org"

    def test_falls_back_to_shorter_prefix(self) -> None:
        assert find([SPECIFIC, BROAD], "AA:BB:00:00:00:00", MatchStrategy.LONGEST) == "Broad Org"


class TestNotFound:
    """Addresses with no matching assignment."""

    def test_find_returns_none(self) -> None:
        assert find([SPECIFIC, BROAD], "11:22:33:44:55:66") is None

    def test_lookup_returns_sentinel(self) -> None:
        assert lookup([SPECIFIC], "11:22:33:44:55:66") == UNKNOWN
        assert lookup([SPECIFIC], "11:22:33:44:55:66", default="unknown") == "unknown"

    def test_empty_address(self) -> None:
        assert find([SPECIFIC], "") is None

    def test_empty_assignment_never_matches(self) -> None:
        blank = Record(Registry.MA_L, "", "Blank Org", "")
        assert find([blank], "AA:BB:CC:DD:EE:FF") is None


class TestMatcher:
    """Memoized matcher used by the sniffer."""

    def test_lookup(self) -> None:
        matcher = Matcher([BROAD, SPECIFIC], MatchStrategy.LONGEST)
        assert matcher.lookup("aa:bb:cc:00:00:01") == "Specific Org"
        assert matcher.lookup("AA-BB-CC-00-00-01") == "Specific Org"
        assert matcher.lookup("00:00:00:00:00:00") == UNKNOWN
        assert len(matcher) == 2

    def test_accepts_strategy_value(self) -> None:
        matcher = Matcher([BROAD, SPECIFIC], "first")
        assert matcher.strategy is MatchStrategy.FIRST
        assert matcher.find("aabbccddeeff") == "Broad Org"
