from .account import Account, SpendResult
from .inventory import Inventory
from .player import MiningReport, PlayerSession

__all__ = ["Account", "Inventory", "MiningReport", "PlayerSession", "SpendResult"]
