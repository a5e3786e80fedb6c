import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from textcraft.core.rng import RNG  # noqa: E402


class ScriptedRNG(RNG):
    """RNG that replays a fixed list of integer draws."""

    def __init__(self, draws):
        super().__init__(seed=0)
        self.draws = list(draws)

    def randint(self, a: int, b: int) -> int:
        if not self.draws:
            raise AssertionError("ScriptedRNG ran out of draws")
        value = self.draws.pop(0)
        assert a <= value <= b, f"scripted draw {value} outside [{a}, {b}]"
        return value


@pytest.fixture()
def scripted_rng():
    return ScriptedRNG


def scripted_input(lines):
    it = iter(lines)

    def _input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture()
def make_input():
    return scripted_input
