"""Static price, yield and cost tables for the mining economy."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from ..items import Collectible, Consumable

STARTING_MONEY = 100
STARTING_TOOL_LEVEL = 1
MAX_TOOL_LEVEL = 3

TOOL_UPGRADE_BASE_COST = 100
TOOL_UPGRADE_COST_PER_LEVEL = 200

MAX_HEALTH = 100
STARTING_DEPTH = 1

COLLECTIBLE_CAPACITY = 20
CONSUMABLE_CAPACITY = 6


class MiningEvent(str, Enum):
    ADVANCE = "advance"
    HUNGER = "hunger"
    HAZARD = "hazard"
    NOTHING = "nothing"


# Tried in order, each against its own percent draw; first hit wins.
MINING_EVENT_TABLE: Tuple[Tuple[int, MiningEvent], ...] = (
    (40, MiningEvent.ADVANCE),
    (20, MiningEvent.HUNGER),
    (10, MiningEvent.HAZARD),
)

EVENT_DAMAGE: Dict[MiningEvent, int] = {
    MiningEvent.HUNGER: 10,
    MiningEvent.HAZARD: 30,
}

ORE_ATTEMPTS_PER_STEP = 2
ORE_ATTEMPT_CHANCE = 50

# tool level -> (iron %, gold %); Diamond takes whatever is left of 100.
# Level 3 leaves nothing for Diamond. Kept as found.
ORE_ODDS: Dict[int, Tuple[int, int]] = {
    1: (57, 28),
    2: (54, 36),
    3: (60, 40),
}

SELL_PRICES: Dict[Collectible, int] = {
    Collectible.IRON_ORE: 20,
    Collectible.GOLD_ORE: 50,
    Collectible.DIAMOND: 120,
}

BUY_PRICES: Dict[Consumable, int] = {
    Consumable.APPLE: 30,
    Consumable.CHICKEN: 70,
    Consumable.BEEF: 90,
}

HEAL_AMOUNTS: Dict[Consumable, int] = {
    Consumable.APPLE: 10,
    Consumable.CHICKEN: 30,
    Consumable.BEEF: 40,
}


def ore_odds_for(tool_level: int) -> Tuple[int, int]:
    """Return the (iron, gold) percentages for a tool level, level 1 if unknown."""
    return ORE_ODDS.get(tool_level, ORE_ODDS[STARTING_TOOL_LEVEL])


def tool_upgrade_cost(tool_level: int) -> int:
    return tool_level * TOOL_UPGRADE_COST_PER_LEVEL + TOOL_UPGRADE_BASE_COST
