"""Closed catalog of the items a player can hold.

Collectibles are mined and sold; consumables are bought and eaten. Each kind
carries a display label and a stable token used by the record stores. The
two token namespaces do not overlap, so both kinds can share one record.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class _CatalogEnum(Enum):
    @property
    def label(self) -> str:
        return self.value

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str):
        for member in cls:
            if member.value == token:
                return member
        return None


class Collectible(_CatalogEnum):
    IRON_ORE = "Iron Ore"
    GOLD_ORE = "Gold Ore"
    DIAMOND = "Diamond"


class Consumable(_CatalogEnum):
    APPLE = "Apple"
    CHICKEN = "Chicken"
    BEEF = "Beef"


def parse_token(token: str) -> Optional[_CatalogEnum]:
    """Resolve a persisted token to its item kind, or None if unknown."""
    return Consumable.from_token(token) or Collectible.from_token(token)
