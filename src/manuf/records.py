"""
OUI record types.

An OUI (organizationally unique identifier) is a 24-bit prefix purchased
from the IEEE Registration Authority by a vendor, manufacturer or other
organization. Only assignments from the MA-L registry mint a new OUI; the
other registries sub-delegate blocks of an existing one.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

_SEPARATORS = re.compile(r"[\s:.\-]")


class Registry(str, Enum):
    """IEEE public OUI listing a record was published in."""
    MA_L = "MA-L"  # http://standards-oui.ieee.org/oui/oui.csv
    MA_M = "MA-M"  # http://standards-oui.ieee.org/oui28/mam.csv
    MA_S = "MA-S"  # http://standards-oui.ieee.org/oui36/oui36.csv
    IAB = "IAB"  # http://standards-oui.ieee.org/iab/iab.csv
    CID = "CID"  # http://standards-oui.ieee.org/cid/cid.csv

    @classmethod
    def parse(cls, value: str) -> Optional["Registry"]:
        """Return the registry tagged ``value`` or None if unknown."""
        try:
            return cls(value.strip())
        except ValueError:
            return None


def normalize_assignment(value: str) -> str:
    """Uppercase an assignment and drop any separators."""
    return _SEPARATORS.sub("", value).upper()


@dataclass(frozen=True)
class Record:
    """A single OUI assignment and the organization holding it."""
    registry: Registry
    assignment: str
    organization_name: str
    organization_address: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "assignment", normalize_assignment(self.assignment))

    def csv_row(self) -> List[str]:
        """Fields in persisted column order."""
        return [
            self.registry.value,
            self.assignment,
            self.organization_name,
            self.organization_address,
        ]

    def to_dict(self) -> dict:
        return {
            "Registry": self.registry.value,
            "Assignment": self.assignment,
            "OrganizationName": self.organization_name,
            "OrganizationAddress": self.organization_address,
        }


Records = List[Record]


__all__ = ["Record", "Records", "Registry", "normalize_assignment"]
