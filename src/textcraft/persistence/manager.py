from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..core.rng import RNG
from ..models.player import PlayerSession
from ..roster import Roster
from .stores import AccountStore, InventoryStore

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_FILE = "account.txt"
DEFAULT_INVENTORY_FILE = "inventory.txt"


class RosterStorage:
    """Loads the whole roster from the two record stores and writes it back.

    Saving always rewrites both files from scratch; there is no dirty
    tracking and no partial update.
    """

    def __init__(
        self,
        data_dir: Path,
        account_file: str = DEFAULT_ACCOUNT_FILE,
        inventory_file: str = DEFAULT_INVENTORY_FILE,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.accounts = AccountStore(self.data_dir / account_file)
        self.inventories = InventoryStore(self.data_dir / inventory_file)

    def load(self, rng: Optional[RNG] = None) -> Roster:
        rng = rng if rng is not None else RNG()
        roster = Roster(rng=rng)
        for account in self.accounts.load():
            inventory = self.inventories.lookup(account.username)
            roster.add(PlayerSession(account, inventory, rng=rng))
        return roster

    def save(self, roster: Roster) -> None:
        sessions = roster.sessions
        self.accounts.save(session.account for session in sessions)
        self.inventories.save(sessions)
        logger.info("Saved %d accounts to %s", len(sessions), self.data_dir)
