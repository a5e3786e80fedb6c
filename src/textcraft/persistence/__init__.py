"""
Line-oriented record stores for accounts and inventories.

- account file: one ``username,money,tool_level`` line per account
- inventory file: one ``username;token;token;...;`` line per account

Both files are rewritten in full from the in-memory roster at every save.
"""
from .records import (
    format_account_line,
    format_inventory_line,
    parse_account_line,
    parse_inventory_line,
)
from .stores import AccountStore, InventoryStore
from .manager import RosterStorage

__all__ = [
    "AccountStore",
    "InventoryStore",
    "RosterStorage",
    "format_account_line",
    "format_inventory_line",
    "parse_account_line",
    "parse_inventory_line",
]
