from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from .core.rng import RNG
from .errors import DuplicateUsernameError, InvalidUsernameError
from .models.account import Account
from .models.inventory import Inventory
from .models.player import PlayerSession

logger = logging.getLogger(__name__)


def is_valid_username(username: str) -> bool:
    return bool(username) and username.isalnum()


class Roster:
    """Every player session known to the process, in load/registration order."""

    def __init__(self, sessions: Optional[Iterable[PlayerSession]] = None,
                 rng: Optional[RNG] = None) -> None:
        self._sessions: List[PlayerSession] = list(sessions or [])
        self.rng = rng if rng is not None else RNG()

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[PlayerSession]:
        return iter(self._sessions)

    @property
    def sessions(self) -> List[PlayerSession]:
        return list(self._sessions)

    def ranked(self) -> List[PlayerSession]:
        """Sessions by balance, richest first; ties keep roster order."""
        return sorted(self._sessions, key=lambda s: s.account.money, reverse=True)

    def find(self, username: str) -> Optional[PlayerSession]:
        for session in self._sessions:
            if session.username == username:
                return session
        return None

    def add(self, session: PlayerSession) -> None:
        self._sessions.append(session)

    def register(self, username: str) -> PlayerSession:
        """Create a new account with starting money and an empty inventory.

        Raises:
            InvalidUsernameError if username is empty or not alphanumeric.
            DuplicateUsernameError if the name is already taken.
        """
        if not is_valid_username(username):
            raise InvalidUsernameError(f"Username must be alphanumeric: {username!r}")
        if self.find(username) is not None:
            raise DuplicateUsernameError(f"Username already taken: {username}")

        session = PlayerSession(Account(username=username), Inventory(), rng=self.rng)
        self._sessions.append(session)
        logger.info("Registered account %s", username)
        return session
