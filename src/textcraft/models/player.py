from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.rng import RNG
from ..economy.constants import (
    EVENT_DAMAGE,
    HEAL_AMOUNTS,
    MAX_HEALTH,
    MINING_EVENT_TABLE,
    ORE_ATTEMPT_CHANCE,
    ORE_ATTEMPTS_PER_STEP,
    SELL_PRICES,
    STARTING_DEPTH,
    MiningEvent,
    ore_odds_for,
    tool_upgrade_cost,
)
from ..errors import NegativeAmountError
from ..items import Collectible
from .account import Account, SpendResult
from .inventory import Inventory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MiningReport:
    """What happened during one mining step, for the menu to describe."""

    event: MiningEvent
    damage: int = 0
    depth: int = STARTING_DEPTH
    health: int = MAX_HEALTH
    mined: List[Collectible] = field(default_factory=list)
    dropped: List[Collectible] = field(default_factory=list)


class PlayerSession:
    """
    Runtime state of one account during a process lifetime.

    Owns the Account and Inventory loaded from storage, plus transient health
    and depth that are never persisted. All gameplay mutations go through
    this object.
    """

    def __init__(self, account: Account, inventory: Optional[Inventory] = None,
                 rng: Optional[RNG] = None) -> None:
        self.account = account
        self.inventory = inventory if inventory is not None else Inventory()
        self.rng = rng if rng is not None else RNG()
        self._health = MAX_HEALTH
        self._depth = STARTING_DEPTH

    def __repr__(self) -> str:
        return (
            f"PlayerSession(username={self.account.username!r}, money={self.account.money}, "
            f"health={self._health}, depth={self._depth})"
        )

    @property
    def username(self) -> str:
        return self.account.username

    @property
    def health(self) -> int:
        return self._health

    @property
    def depth(self) -> int:
        return self._depth

    # --- Money ---

    def spend(self, amount: int) -> SpendResult:
        return self.account.spend(amount)

    # --- Health ---

    def apply_damage(self, amount: int) -> None:
        if amount < 0:
            raise NegativeAmountError(f"Damage cannot be negative: {amount}")
        old = self._health
        self._health = max(0, self._health - amount)
        logger.debug("%s took %d damage: %d -> %d", self.username, amount, old, self._health)

    def heal(self, amount: int) -> None:
        if amount < 0:
            raise NegativeAmountError(f"Healing cannot be negative: {amount}")
        old = self._health
        self._health = min(MAX_HEALTH, self._health + amount)
        logger.debug("%s healed %d: %d -> %d", self.username, amount, old, self._health)

    def is_alive(self) -> bool:
        return self._health > 0

    # --- Expedition ---

    def begin_mining_expedition(self) -> None:
        """Start a fresh expedition at depth 1. Health carries over."""
        self._depth = STARTING_DEPTH

    def descend(self) -> None:
        self._depth += 1

    def run_mining_step(self) -> MiningReport:
        """Roll one mining event, then make the ore attempts.

        Callers check is_alive() first; a dead player is not stopped here.
        """
        event = MiningEvent.NOTHING
        for percent, candidate in MINING_EVENT_TABLE:
            if self.rng.chance(percent):
                event = candidate
                break

        damage = EVENT_DAMAGE.get(event, 0)
        if event is MiningEvent.ADVANCE:
            self.descend()
        elif damage:
            self.apply_damage(damage)

        mined: List[Collectible] = []
        dropped: List[Collectible] = []
        for _ in range(ORE_ATTEMPTS_PER_STEP):
            if not self.rng.chance(ORE_ATTEMPT_CHANCE):
                continue
            kind = self.roll_collectible()
            if self.inventory.insert_collectible(kind):
                mined.append(kind)
            else:
                dropped.append(kind)

        logger.debug(
            "%s mining step: event=%s depth=%d health=%d mined=%s",
            self.username,
            event.value,
            self._depth,
            self._health,
            [kind.label for kind in mined],
        )
        return MiningReport(
            event=event,
            damage=damage,
            depth=self._depth,
            health=self._health,
            mined=mined,
            dropped=dropped,
        )

    def roll_collectible(self) -> Collectible:
        """Pick a collectible kind with one percent draw, weighted by tool level."""
        iron, gold = ore_odds_for(self.account.tool_level)
        draw = self.rng.roll_percent()
        if draw <= iron:
            return Collectible.IRON_ORE
        if draw <= iron + gold:
            return Collectible.GOLD_ORE
        return Collectible.DIAMOND

    # --- Food ---

    def can_eat(self, display_index: int) -> bool:
        return self.inventory.consumable_at(display_index) is not None

    def eat(self, display_index: int) -> bool:
        food = self.inventory.consumable_at(display_index)
        if food is None:
            return False
        self.heal(HEAL_AMOUNTS[food])
        self.inventory.consume_at(display_index)
        logger.info("%s ate %s (health: %d)", self.username, food.label, self._health)
        return True

    # --- Selling ---

    def sell_all_collectibles(self, prices: Optional[Dict[Collectible, int]] = None) -> int:
        """Credit every held collectible at its price and empty the bag.

        Returns the amount credited.
        """
        prices = prices or SELL_PRICES
        counts = self.inventory.count_by_kind()
        total = sum(count * prices[kind] for kind, count in counts.items())
        self.account.credit(total)
        self.inventory.clear_all_collectibles()
        return total

    # --- Tool ---

    def upgrade_tool_cost(self) -> int:
        return tool_upgrade_cost(self.account.tool_level)

    def is_tool_maxed(self) -> bool:
        return self.account.is_tool_maxed

    def upgrade_tool(self) -> None:
        self.account.upgrade_tool()
