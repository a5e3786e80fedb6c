from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..economy.constants import MAX_TOOL_LEVEL, STARTING_MONEY, STARTING_TOOL_LEVEL
from ..errors import NegativeAmountError

logger = logging.getLogger(__name__)

INSUFFICIENT_FUNDS = "Not enough money!"


@dataclass(frozen=True)
class SpendResult:
    """Outcome of a spend attempt. Truthy on success."""

    success: bool
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success


@dataclass
class Account:
    """Persistent identity of a player: name, balance and tool tier.

    Usernames are validated by the roster before an Account is built; this
    class only holds values and guards the balance and tool level.
    """

    username: str
    money: int = STARTING_MONEY
    tool_level: int = STARTING_TOOL_LEVEL

    def spend(self, amount: int) -> SpendResult:
        if amount < 0:
            raise NegativeAmountError(f"Amount to spend cannot be negative: {amount}")
        if amount > self.money:
            logger.debug(
                "Rejected spend for %s: have=%s, need=%s", self.username, self.money, amount
            )
            return SpendResult(success=False, error_message=INSUFFICIENT_FUNDS)
        self.money -= amount
        logger.debug("Spent %d for %s (remaining: %d)", amount, self.username, self.money)
        return SpendResult(success=True)

    def credit(self, amount: int) -> None:
        if amount < 0:
            raise NegativeAmountError(f"Amount to credit cannot be negative: {amount}")
        self.money += amount
        logger.debug("Credited %d to %s (total: %d)", amount, self.username, self.money)

    def upgrade_tool(self) -> None:
        if self.tool_level >= MAX_TOOL_LEVEL:
            return
        self.tool_level += 1
        logger.info("%s upgraded tool to level %d", self.username, self.tool_level)

    @property
    def is_tool_maxed(self) -> bool:
        return self.tool_level >= MAX_TOOL_LEVEL
