"""
random_bot.py - A player that drops its tokens in a random available column
"""

from typing import Optional, Union

import numpy as np

from puissance4.debug import debug
from puissance4.exceptions import NoLegalMoveError
from puissance4.utils import Token
from puissance4.game.area import AreaView
from puissance4.players.base import Player


class RandomPlayer(Player):
    """Uniformly random choice among the columns that are not full."""

    def __init__(self, name: str = "Random bot",
                 rng: Optional[Union[np.random.Generator, int]] = None):
        """
        Args:
            name: Display name
            rng: A numpy Generator, or a seed to build one (None for OS entropy)
        """
        super().__init__(name)
        if isinstance(rng, np.random.Generator):
            self.rng = rng
        else:
            self.rng = np.random.default_rng(rng)

    def choose_move(self, area: AreaView, token: Token) -> int:
        available = area.available_columns()
        if not available:
            raise NoLegalMoveError(f"{self.name} has no column left to play")

        column = int(self.rng.choice(available))
        debug.debug(f"{self.name} picks column {column} among {available}", "player")
        return column
