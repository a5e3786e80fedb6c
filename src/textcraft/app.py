from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from .economy.constants import MiningEvent
from .economy.shop import Shop
from .errors import TextcraftError
from .items import Consumable
from .models.player import MiningReport, PlayerSession
from .persistence.manager import RosterStorage
from .roster import Roster

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

PROMPT = ">> "
INVALID_CHOICE = -1


class TextcraftApp:
    """Console menus driving one roster.

    All game rules live in PlayerSession and Shop; this class only renders
    state, reads numeric choices and calls them. The roster is written back
    to storage after every pass through the main menu. Unparseable or
    out-of-range choices redraw the current menu.
    """

    def __init__(
        self,
        storage: RosterStorage,
        roster: Roster,
        shop: Optional[Shop] = None,
        input_fn: Optional[InputFn] = None,
        output_fn: Optional[OutputFn] = None,
    ) -> None:
        self.storage = storage
        self.roster = roster
        self.shop = shop or Shop()
        self._input = input_fn or input
        self._output = output_fn or print

    # ---------------------- Entry ----------------------
    def run(self) -> int:
        """Run the main menu until the player exits or input ends."""
        try:
            self._main_menu()
        except EOFError:
            logger.info("Input closed; saving and exiting")
            self._say("")
        self.storage.save(self.roster)
        return 0

    def _main_menu(self) -> None:
        while True:
            self._say("Welcome to Textcraft!")
            self._say("1. Continue\n2. New Game\n3. Exit")
            choice = self._read_choice()
            if choice == 1:
                self.login_menu()
            elif choice == 2:
                self.register_menu()
            elif choice == 3:
                return
            self.storage.save(self.roster)

    # ---------------------- Accounts ----------------------
    def register_menu(self) -> PlayerSession:
        self._say("Creating a new account:")
        while True:
            username = self._input("Enter your username (Must be alphanumeric): ").strip()
            try:
                session = self.roster.register(username)
            except TextcraftError as exc:
                logger.debug("Registration rejected: %s", exc)
                self._say(str(exc))
                continue
            break
        self._say(f"Made an account with username: {session.username}")
        self._wait_for_enter()
        return session

    def login_menu(self) -> None:
        if not len(self.roster):
            self._say("No account found!")
            self._wait_for_enter()
            return

        while True:
            self._say("Choose an account! (0 to return)")
            ranked = self.roster.ranked()
            for index, session in enumerate(ranked, start=1):
                self._say(f"{index}. {session.username}, Money: {session.account.money}")
            choice = self._read_choice()
            if choice == 0:
                return
            if 1 <= choice <= len(ranked):
                self.play_menu(ranked[choice - 1])

    def play_menu(self, session: PlayerSession) -> None:
        while True:
            self._say(f"Welcome, {session.username}!")
            self._say("1. Go mining\n2. Go shopping\n3. Back")
            choice = self._read_choice()
            if choice == 1:
                self.mining_menu(session)
            elif choice == 2:
                self.shop_menu(session)
            elif choice == 3:
                return

    # ---------------------- Mining ----------------------
    def mining_menu(self, session: PlayerSession) -> None:
        session.begin_mining_expedition()
        while True:
            self._say("Your inventory:")
            self._show_slots(session.inventory.collectible_slots)
            self._say(f"You're on depth: {session.depth}")
            self._say(f"Health: {session.health}")
            self._say("What to do?")
            self._say("1. Go Deeper\n2. Eat Food\n3. Return")
            choice = self._read_choice()
            if choice == 1:
                if session.is_alive():
                    self._describe(session.run_mining_step())
                else:
                    self._say("You don't have enough health!")
            elif choice == 2:
                self.eat_menu(session)
            elif choice == 3:
                return

    def _describe(self, report: MiningReport) -> None:
        if report.event is MiningEvent.ADVANCE:
            self._say("You successfully dug deeper!")
        elif report.event is MiningEvent.HUNGER:
            self._say(f"You are getting hungry... (-{report.damage} health)")
        elif report.event is MiningEvent.HAZARD:
            self._say(f"Something exploded next to you! (-{report.damage} health)")
        for kind in report.mined:
            self._say(f"You mined {kind.label}!")
        for kind in report.dropped:
            self._say(f"Your bag is full, you left {kind.label} behind.")

    def eat_menu(self, session: PlayerSession) -> None:
        while True:
            self._say("Your food sack: ")
            self._show_slots(session.inventory.consumable_slots)
            choice = self._read_choice("Enter the index of the food you want to eat (0 to cancel): ")
            if choice == 0:
                return
            if session.eat(choice):
                self._say("You regenerated some health!")
            else:
                self._say("Please choose a valid food!")
            self._wait_for_enter()

    # ---------------------- Shop ----------------------
    def shop_menu(self, session: PlayerSession) -> None:
        while True:
            self._say("Welcome to the shop!")
            self._say(f"Money: {session.account.money}")
            self._say("1. Sell ores\n2. Buy items\n3. Back")
            choice = self._read_choice()
            if choice == 1:
                self.sell_menu(session)
            elif choice == 2:
                self.buy_menu(session)
            elif choice == 3:
                return

    def sell_menu(self, session: PlayerSession) -> None:
        while True:
            quote = self.shop.quote_sale(session)
            self._say(f"Your money: {session.account.money}")
            self._say("Your ores:")
            for kind, count in quote.counts.items():
                self._say(f"- {kind.label}: {count} @ {self.shop.sell_prices[kind]}$ per piece")
            self._say("1. Sell all\n2. Back")
            if self._read_choice() != 1:
                return
            receipt = self.shop.sell_all(session)
            self._say(f"Sold everything for {receipt.total}$")

    def buy_menu(self, session: PlayerSession) -> None:
        while True:
            self._say("Your food bag:")
            self._show_slots(session.inventory.consumable_slots)
            self._say(f"Your money: {session.account.money}")
            self._say("=====================")

            options: List[Optional[Consumable]] = list(self.shop.price_list())
            lines = [
                f"{n}. Buy {kind.label} - ${price}"
                for n, (kind, price) in enumerate(self.shop.price_list().items(), start=1)
            ]
            if not session.is_tool_maxed():
                options.append(None)
                lines.append(f"{len(options)}. Upgrade Pickaxe - ${session.upgrade_tool_cost()}")
            lines.append(f"{len(options) + 1}. Return")
            self._say("\n".join(lines))

            choice = self._read_choice()
            if choice == len(options) + 1:
                return
            if not 1 <= choice <= len(options):
                continue

            kind = options[choice - 1]
            if kind is None:
                receipt = self.shop.upgrade_tool(session)
                self._say("Upgraded pickaxe level!" if receipt else receipt.error_message)
                self._wait_for_enter()
                continue

            receipt = self.shop.buy_consumable(session, kind)
            if receipt:
                self._say(f"Buying {receipt.item_name} at {receipt.price}$")
            else:
                self._say(receipt.error_message)
                self._wait_for_enter()

    # ---------------------- IO helpers ----------------------
    def _say(self, text: str) -> None:
        self._output(text)

    def _read_choice(self, prompt: str = PROMPT) -> int:
        raw = self._input(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            return INVALID_CHOICE

    def _wait_for_enter(self) -> None:
        self._input("Press Enter to continue...")

    def _show_slots(self, slots: Sequence) -> None:
        for index, kind in enumerate(slots, start=1):
            self._say(f"{index}. {kind.label if kind is not None else 'Empty'}")
