from __future__ import annotations

import logging
from typing import Optional

from ..economy.constants import MAX_TOOL_LEVEL, STARTING_TOOL_LEVEL
from ..items import Collectible, Consumable, parse_token
from ..models.account import Account
from ..models.inventory import Inventory

logger = logging.getLogger(__name__)

ACCOUNT_DELIMITER = ","
INVENTORY_DELIMITER = ";"

DEFAULT_MONEY = 0


def _parse_non_negative(raw: str, default: int) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def parse_account_line(line: str) -> Optional[Account]:
    """Parse ``username,money,tool_level``.

    Returns None when the line does not have exactly three fields. Bad
    numbers fall back to money 0 and tool level 1; an out-of-range tool
    level is clamped into [1, 3].
    """
    tokens = line.rstrip("\r\n").split(ACCOUNT_DELIMITER)
    if len(tokens) != 3:
        return None

    username = tokens[0]
    money = _parse_non_negative(tokens[1], DEFAULT_MONEY)
    tool_level = _parse_non_negative(tokens[2], STARTING_TOOL_LEVEL)
    clamped = max(STARTING_TOOL_LEVEL, min(MAX_TOOL_LEVEL, tool_level))
    if clamped != tool_level:
        logger.warning(
            "Tool level %d for %s out of range; clamped to %d", tool_level, username, clamped
        )
    return Account(username=username, money=money, tool_level=clamped)


def format_account_line(account: Account) -> str:
    return f"{account.username},{account.money},{account.tool_level}\n"


def parse_inventory_line(line: str) -> Inventory:
    """Build an Inventory from ``username;token;token;...;``.

    The leading username field is skipped. Collectible and consumable tokens
    are both accepted; unknown or empty tokens are ignored.
    """
    inventory = Inventory()
    fields = line.rstrip("\r\n").split(INVENTORY_DELIMITER)
    for token in fields[1:]:
        kind = parse_token(token)
        if isinstance(kind, Collectible):
            inventory.insert_collectible(kind)
        elif isinstance(kind, Consumable):
            inventory.insert_consumable(kind)
        elif token:
            logger.warning("Ignoring unknown inventory token %r", token)
    return inventory


def format_inventory_line(username: str, inventory: Inventory) -> str:
    """Serialize the collectibles of an inventory. Consumables are not stored."""
    parts = [username] + [kind.token for kind in inventory.collectibles()]
    return INVENTORY_DELIMITER.join(parts) + INVENTORY_DELIMITER + "\n"
