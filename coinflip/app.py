from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

import numpy as np

from coinflip.config import SimulatorConfig
from coinflip.console import Console
from coinflip.core.flips import generate
from coinflip.core.rng import make_rng
from coinflip.core.setup import logger
from coinflip.core.types import FlipSequence
from coinflip.reporting import list_flips, show_stats

MENU_LINES = (
    "================ MAIN MENU ===============",
    "1 - Generate coin flips",
    "2 - Display flip results",
    "3 - Show pattern statistics",
    "0 - Exit program",
    "==========================================",
)
FAREWELL = "Thank you for using the Coin Flip Simulator!"


class MenuChoice(IntEnum):
    EXIT = 0
    GENERATE = 1
    LIST = 2
    STATS = 3


@dataclass
class AppState:
    """Mutable state owned by the menu loop: the latest flip sequence."""

    flips: FlipSequence = field(default_factory=FlipSequence.empty)

    @property
    def num_flips(self) -> int:
        return len(self.flips)

    def replace(self, flips: FlipSequence) -> None:
        self.flips = flips


class MenuLoop:
    """Interactive menu: show, read a choice, dispatch, pause, repeat."""

    def __init__(
        self,
        console: Console,
        config: Optional[SimulatorConfig] = None,
        rng: Optional[np.random.Generator] = None,
        state: Optional[AppState] = None,
    ):
        self.console = console
        self.config = config or SimulatorConfig()
        # Seeded once per process; never reseeded between generations.
        self.rng = rng if rng is not None else make_rng()
        self.state = state or AppState()

    def display_menu(self) -> None:
        for line in MENU_LINES:
            self.console.write(line)

    def generate_flips(self) -> int:
        cfg = self.config
        self.console.write("How many coin flips would you like to generate?")
        self.console.write(f"(Range: {cfg.min_flips} - {cfg.max_flips}): ", nl=False)
        requested = self.console.get_valid_input(cfg.min_flips, cfg.max_flips)

        # Drop the old sequence before allocating the new one.
        self.state.replace(FlipSequence.empty())
        self.state.replace(generate(requested, self.rng))
        return requested

    def dispatch(self, choice: MenuChoice) -> None:
        if choice is MenuChoice.GENERATE:
            n = self.generate_flips()
            self.console.write(f"\nSuccessfully generated {n} coin flips!")
        elif choice is MenuChoice.LIST:
            list_flips(self.console, self.state.flips, self.config.page_size)
        elif choice is MenuChoice.STATS:
            show_stats(self.console, self.state.flips, self.config.sequence_length)
        elif choice is MenuChoice.EXIT:
            self.console.write(FAREWELL)

    def step(self) -> MenuChoice:
        """Run one menu round and return the choice that was made."""
        self.display_menu()
        low, high = int(MenuChoice.EXIT), int(MenuChoice.STATS)
        self.console.write(f"Enter your choice ({low}-{high}): ", nl=False)
        choice = MenuChoice(self.console.get_valid_input(low, high))
        self.console.write()
        logger.debug(f"Menu choice: {choice.name}")

        self.dispatch(choice)
        if choice is not MenuChoice.EXIT:
            self.console.pause()
            self.console.clear()
        return choice

    def run(self) -> None:
        self.console.clear()
        while self.step() is not MenuChoice.EXIT:
            pass
        logger.info("Menu loop finished")


__all__ = ["AppState", "FAREWELL", "MENU_LINES", "MenuChoice", "MenuLoop"]
