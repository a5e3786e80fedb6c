from collections import Counter

import pytest

from textcraft.items import Collectible, Consumable
from textcraft.models.account import Account
from textcraft.models.inventory import Inventory
from textcraft.persistence.records import (
    format_account_line,
    format_inventory_line,
    parse_account_line,
    parse_inventory_line,
)


def test_account_line_format():
    assert format_account_line(Account("steve", 250, 2)) == "steve,250,2\n"


@pytest.mark.parametrize("money, level", [(0, 1), (100, 1), (12345, 2), (999999, 3)])
def test_account_line_round_trip(money, level):
    account = Account("steve", money=money, tool_level=level)
    assert parse_account_line(format_account_line(account)) == account


@pytest.mark.parametrize("line", ["", "\n", "steve,100", "steve,100,1,extra", "just text"])
def test_account_line_wrong_field_count_is_skipped(line):
    assert parse_account_line(line) is None


@pytest.mark.parametrize("line, money, level", [
    ("steve,abc,2", 0, 2),
    ("steve,100,xyz", 100, 1),
    ("steve,,", 0, 1),
    ("steve,-5,2", 0, 2),
    ("steve, 40 , 3 \n", 40, 3),
])
def test_account_line_bad_numbers_default(line, money, level):
    account = parse_account_line(line)
    assert account.username == "steve"
    assert account.money == money
    assert account.tool_level == level


def test_account_line_tool_level_clamped(caplog):
    assert parse_account_line("steve,10,9").tool_level == 3
    assert parse_account_line("steve,10,0").tool_level == 1
    assert "clamped" in caplog.text


def test_inventory_line_format_only_stores_collectibles():
    inv = Inventory()
    inv.insert_collectible(Collectible.IRON_ORE)
    inv.insert_collectible(Collectible.DIAMOND)
    inv.insert_consumable(Consumable.APPLE)
    assert format_inventory_line("steve", inv) == "steve;Iron Ore;Diamond;\n"


def test_empty_inventory_line():
    assert format_inventory_line("steve", Inventory()) == "steve;\n"
    assert list(parse_inventory_line("steve;\n").collectibles()) == []


def sparse_inventory(*slots) -> Inventory:
    """Inventory whose collectible slots hold exactly `slots`, None meaning a gap."""
    inv = Inventory()
    inv._collectibles[: len(slots)] = list(slots)
    return inv


def test_inventory_round_trip_preserves_multiset_not_positions():
    inv = sparse_inventory(Collectible.GOLD_ORE, None, Collectible.IRON_ORE, None, Collectible.DIAMOND)

    restored = parse_inventory_line(format_inventory_line("steve", inv))

    assert Counter(restored.collectibles()) == Counter(inv.collectibles())
    # Gaps are squeezed out on reload
    assert restored.collectible_slots[:3] == [
        Collectible.GOLD_ORE,
        Collectible.IRON_ORE,
        Collectible.DIAMOND,
    ]
    assert inv.collectible_slots[1] is None


def test_inventory_parse_skips_username_and_unknown_tokens():
    inv = parse_inventory_line("Diamond;Gold Ore;Emerald;Apple;;\n")
    assert list(inv.collectibles()) == [Collectible.GOLD_ORE]
    assert list(inv.consumables()) == [Consumable.APPLE]
