"""
base.py - The player interface

Any object the engine can ask for a move derives from Player: a human behind a
terminal, a random bot, or a smarter AI plugged in later.
"""

from abc import ABC, abstractmethod

from puissance4.exceptions import Puissance4Error
from puissance4.utils import Token
from puissance4.game.area import AreaView


class Player(ABC):
    """Base class for every player implementation."""

    def __init__(self, name: str):
        self.name = name

    def rename(self, name: str):
        self.name = name

    @abstractmethod
    def choose_move(self, area: AreaView, token: Token) -> int:
        """
        Pick the column to play.

        Args:
            area: Read-only view of the current area
            token: The token this player is placing

        Returns:
            A column index in [0, area.width)

        Raises:
            NoLegalMoveError: if every column is full
        """

    def notify_rejected(self, column: int, error: Puissance4Error):
        """Called when the engine refused ``column``; the player is asked again."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
