from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, TypeVar

from ..economy.constants import COLLECTIBLE_CAPACITY, CONSUMABLE_CAPACITY
from ..items import Collectible, Consumable

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _insert_first_free(slots: List[Optional[T]], item: T) -> bool:
    for index, slot in enumerate(slots):
        if slot is None:
            slots[index] = item
            return True
    return False


class Inventory:
    """
    Fixed-capacity slotted storage for collectibles and consumables.

    - Insertion fills the first empty slot; a full container drops the item
      and reports False instead of raising.
    - Slots never move, so clearing one leaves a gap that the next insert
      fills.
    - Consumable slots are addressed by 1-based display index.
    """

    def __init__(
        self,
        collectible_capacity: int = COLLECTIBLE_CAPACITY,
        consumable_capacity: int = CONSUMABLE_CAPACITY,
    ) -> None:
        self._collectibles: List[Optional[Collectible]] = [None] * collectible_capacity
        self._consumables: List[Optional[Consumable]] = [None] * consumable_capacity

    # --- Collectibles ---

    @property
    def collectible_slots(self) -> List[Optional[Collectible]]:
        return list(self._collectibles)

    @property
    def collectible_capacity(self) -> int:
        return len(self._collectibles)

    def insert_collectible(self, kind: Collectible) -> bool:
        inserted = _insert_first_free(self._collectibles, kind)
        if not inserted:
            logger.debug("Collectible bag full; dropped %s", kind.label)
        return inserted

    def collectibles(self) -> Iterator[Collectible]:
        """Yield occupied collectible slots in slot order."""
        return (kind for kind in self._collectibles if kind is not None)

    def count_by_kind(self) -> Dict[Collectible, int]:
        counts = {kind: 0 for kind in Collectible}
        for kind in self.collectibles():
            counts[kind] += 1
        return counts

    def clear_all_collectibles(self) -> None:
        self._collectibles = [None] * len(self._collectibles)

    # --- Consumables ---

    @property
    def consumable_slots(self) -> List[Optional[Consumable]]:
        return list(self._consumables)

    @property
    def consumable_capacity(self) -> int:
        return len(self._consumables)

    def insert_consumable(self, kind: Consumable) -> bool:
        inserted = _insert_first_free(self._consumables, kind)
        if not inserted:
            logger.debug("Consumable bag full; dropped %s", kind.label)
        return inserted

    def consumables(self) -> Iterator[Consumable]:
        return (kind for kind in self._consumables if kind is not None)

    def has_free_consumable_slot(self) -> bool:
        return any(slot is None for slot in self._consumables)

    def consumable_at(self, index: int) -> Optional[Consumable]:
        """Return the consumable at a 1-based display index, None if empty or out of range."""
        if not 1 <= index <= len(self._consumables):
            return None
        return self._consumables[index - 1]

    def consume_at(self, index: int) -> bool:
        if self.consumable_at(index) is None:
            return False
        self._consumables[index - 1] = None
        return True
