"""Public listings of MAC address prefixes and their organizations."""

from __future__ import annotations

from typing import List

# Official IEEE listings. These are only served over plain HTTP.
OUI_URL = "http://standards-oui.ieee.org/oui/oui.csv"
CID_URL = "http://standards-oui.ieee.org/cid/cid.csv"
IAB_URL = "http://standards-oui.ieee.org/iab/iab.csv"
MAM_URL = "http://standards-oui.ieee.org/oui28/mam.csv"
OUI36_URL = "http://standards-oui.ieee.org/oui36/oui36.csv"

# Consolidated copy of the five listings above, served over HTTPS.
RAW_GITHUB_URL = "https://raw.githubusercontent.com/picatz/manuf/main/manuf.csv"

# Every authoritative listing. RAW_GITHUB_URL is compiled from these and is
# not part of the list.
ALL_PUBLIC_LISTING_URLS: List[str] = [
    OUI_URL,
    CID_URL,
    IAB_URL,
    MAM_URL,
    OUI36_URL,
]


__all__ = [
    "ALL_PUBLIC_LISTING_URLS",
    "CID_URL",
    "IAB_URL",
    "MAM_URL",
    "OUI36_URL",
    "OUI_URL",
    "RAW_GITHUB_URL",
]
