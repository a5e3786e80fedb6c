from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional

from ..items import Collectible, Consumable
from .constants import BUY_PRICES, SELL_PRICES

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..models.player import PlayerSession

logger = logging.getLogger(__name__)

NO_FREE_SPACE = "You have no free space!"
TOOL_MAXED = "Your tool is already at the highest level."


@dataclass(frozen=True)
class PurchaseReceipt:
    """Result of a shop purchase. Truthy when the purchase went through."""

    success: bool
    item_name: str
    price: int
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class SaleReceipt:
    """Details about an all-or-nothing collectible sale."""

    counts: Dict[Collectible, int] = field(default_factory=dict)
    total: int = 0


class Shop:
    """Fixed-price shop: buys every collectible, sells food and tool upgrades.

    Failures (no money, no room, tool maxed) come back as unsuccessful
    receipts and leave the session untouched.
    """

    def __init__(self, buy_prices: Optional[Dict[Consumable, int]] = None,
                 sell_prices: Optional[Dict[Collectible, int]] = None) -> None:
        self.buy_prices = dict(buy_prices or BUY_PRICES)
        self.sell_prices = dict(sell_prices or SELL_PRICES)

    def price_list(self) -> Dict[Consumable, int]:
        return dict(self.buy_prices)

    def quote_sale(self, session: PlayerSession) -> SaleReceipt:
        """What selling everything would pay right now, without selling."""
        counts = session.inventory.count_by_kind()
        total = sum(count * self.sell_prices[kind] for kind, count in counts.items())
        return SaleReceipt(counts=counts, total=total)

    def sell_all(self, session: PlayerSession) -> SaleReceipt:
        quote = self.quote_sale(session)
        session.sell_all_collectibles(self.sell_prices)
        logger.info(
            "%s sold collectibles for %d (balance: %d)",
            session.username,
            quote.total,
            session.account.money,
        )
        return quote

    def buy_consumable(self, session: PlayerSession, kind: Consumable) -> PurchaseReceipt:
        price = self.buy_prices[kind]
        if not session.inventory.has_free_consumable_slot():
            return PurchaseReceipt(False, kind.label, price, NO_FREE_SPACE)

        result = session.spend(price)
        if not result:
            return PurchaseReceipt(False, kind.label, price, result.error_message)

        session.inventory.insert_consumable(kind)
        logger.info(
            "%s bought %s for %d (balance: %d)",
            session.username,
            kind.label,
            price,
            session.account.money,
        )
        return PurchaseReceipt(True, kind.label, price)

    def upgrade_tool(self, session: PlayerSession) -> PurchaseReceipt:
        if session.is_tool_maxed():
            return PurchaseReceipt(False, "Tool upgrade", 0, TOOL_MAXED)

        cost = session.upgrade_tool_cost()
        result = session.spend(cost)
        if not result:
            return PurchaseReceipt(False, "Tool upgrade", cost, result.error_message)

        session.upgrade_tool()
        return PurchaseReceipt(True, "Tool upgrade", cost)
