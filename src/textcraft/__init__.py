"""
Textcraft core package.

Headless game logic for a console mining game:
- Accounts with a money balance and a tool tier
- Fixed-slot inventories of collectibles and consumables
- Player sessions with health, depth and the probabilistic mining step
- A fixed-price shop and flat-file persistence of the whole roster

The console menus in ``textcraft.app`` compose these services.
"""
from .core.rng import RNG
from .economy.shop import PurchaseReceipt, SaleReceipt, Shop
from .errors import (
    DuplicateUsernameError,
    InvalidUsernameError,
    NegativeAmountError,
    SettingsError,
    TextcraftError,
)
from .items import Collectible, Consumable
from .models import Account, Inventory, MiningReport, PlayerSession, SpendResult
from .roster import Roster

__version__ = "0.1.0"

__all__ = [
    "Account",
    "Collectible",
    "Consumable",
    "DuplicateUsernameError",
    "Inventory",
    "InvalidUsernameError",
    "MiningReport",
    "NegativeAmountError",
    "PlayerSession",
    "PurchaseReceipt",
    "RNG",
    "Roster",
    "SaleReceipt",
    "SettingsError",
    "Shop",
    "SpendResult",
    "TextcraftError",
]
