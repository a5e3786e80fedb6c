from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Every probabilistic decision in the game draws from an instance of this
    class so a fixed seed (or a scripted subclass in tests) reproduces a
    session exactly.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def roll_percent(self) -> int:
        """Return a uniform integer in [1, 100]."""
        return self.randint(1, 100)

    def chance(self, percent: int) -> bool:
        """True with probability percent/100, using one roll_percent() draw."""
        return self.roll_percent() <= percent
