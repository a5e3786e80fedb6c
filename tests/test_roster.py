import pytest

from textcraft.errors import DuplicateUsernameError, InvalidUsernameError
from textcraft.models.account import Account
from textcraft.models.player import PlayerSession
from textcraft.roster import Roster, is_valid_username


@pytest.mark.parametrize("name, valid", [
    ("steve", True),
    ("Steve42", True),
    ("", False),
    ("two words", False),
    ("semi;colon", False),
    ("comma,name", False),
])
def test_username_validation(name, valid):
    assert is_valid_username(name) is valid


def test_register_creates_default_account():
    roster = Roster()
    session = roster.register("alex")
    assert session.account.money == 100
    assert session.account.tool_level == 1
    assert list(session.inventory.collectibles()) == []
    assert roster.find("alex") is session
    assert len(roster) == 1


def test_register_rejects_invalid_and_duplicate():
    roster = Roster()
    roster.register("alex")
    with pytest.raises(InvalidUsernameError):
        roster.register("al ex")
    with pytest.raises(InvalidUsernameError):
        roster.register("")
    with pytest.raises(DuplicateUsernameError):
        roster.register("alex")
    assert len(roster) == 1


def test_ranked_orders_by_money_desc_and_is_stable():
    sessions = [
        PlayerSession(Account("a", money=50)),
        PlayerSession(Account("b", money=200)),
        PlayerSession(Account("c", money=50)),
        PlayerSession(Account("d", money=120)),
    ]
    roster = Roster(sessions)

    ranked = [s.username for s in roster.ranked()]

    assert ranked == ["b", "d", "a", "c"]
    # Ranking does not reorder the roster itself
    assert [s.username for s in roster] == ["a", "b", "c", "d"]
