from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from ..models.account import Account
from ..models.inventory import Inventory
from ..models.player import PlayerSession
from .records import (
    format_account_line,
    format_inventory_line,
    parse_account_line,
    parse_inventory_line,
)

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def _decoded_lines(path: Path) -> Iterator[Tuple[int, str]]:
    """Yield (line number, text) for every line of path that decodes cleanly.

    Undecodable lines are logged and skipped so one corrupt record cannot
    abort the rest of the file.
    """
    with path.open("rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                yield lineno, raw.decode(ENCODING)
            except UnicodeDecodeError as exc:
                logger.warning("Skipping undecodable record at %s:%d (%s)", path, lineno, exc)


class AccountStore:
    """Flat file of ``username,money,tool_level`` records."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> List[Account]:
        """Read every well-formed account line; a missing file means no accounts.

        Raises OSError if the file exists but cannot be read.
        """
        if not self.path.exists():
            logger.info("No account file at %s; starting with an empty roster", self.path)
            return []

        accounts: List[Account] = []
        for lineno, line in _decoded_lines(self.path):
            account = parse_account_line(line)
            if account is None:
                logger.warning("Skipping malformed account record at %s:%d", self.path, lineno)
                continue
            accounts.append(account)
        logger.info("Loaded %d accounts from %s", len(accounts), self.path)
        return accounts

    def save(self, accounts: Iterable[Account]) -> None:
        with self.path.open("w", encoding=ENCODING) as f:
            for account in accounts:
                f.write(format_account_line(account))
        logger.debug("Wrote account file %s", self.path)


class InventoryStore:
    """Flat file of ``username;token;...;`` records, one per account."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def lookup(self, username: str) -> Inventory:
        """Return the inventory of the first line starting with username.

        Matching is by prefix, so "bob" also matches a line for "bobby" if
        that line comes first. No match, or no file, gives an empty inventory.
        """
        if not self.path.exists():
            return Inventory()

        for _, line in _decoded_lines(self.path):
            if line.startswith(username):
                return parse_inventory_line(line)
        return Inventory()

    def save(self, sessions: Iterable[PlayerSession]) -> None:
        with self.path.open("w", encoding=ENCODING) as f:
            for session in sessions:
                f.write(format_inventory_line(session.username, session.inventory))
        logger.debug("Wrote inventory file %s", self.path)
