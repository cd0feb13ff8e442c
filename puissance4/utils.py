"""
utils.py - Constants, enumerations and helpers shared by the Puissance 4 engine

Coordinates are always given as (column, row) with row 0 at the bottom of the
area. Grids handled here are numpy arrays indexed ``grid[row, column]``.
"""

from enum import Enum, auto
from typing import List, Optional

import numpy as np

# Area dimensions
AREA_COLS = 7
AREA_ROWS = 6
VICTORY_NUMBER = 4  # aligned tokens needed to win


class Token(Enum):
    """Cell contents. The value is what the area grid stores."""
    EMPTY = 0
    YELLOW = 1  # first player
    RED = 2

    def other(self) -> 'Token':
        if self == Token.YELLOW:
            return Token.RED
        elif self == Token.RED:
            return Token.YELLOW
        return Token.EMPTY

    @property
    def symbol(self) -> str:
        return TOKEN_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Token':
        for token, sym in TOKEN_SYMBOLS.items():
            if sym == symbol:
                return token
        raise ValueError(f"Unknown token symbol: {symbol!r}")

    def __str__(self):
        return self.name.capitalize()


TOKEN_SYMBOLS = {
    Token.EMPTY: ".",
    Token.YELLOW: "Y",
    Token.RED: "R",
}


class Slot(Enum):
    """Engine seats. Slot ONE plays yellow and always opens the game."""
    ONE = 1
    TWO = 2

    def other(self) -> 'Slot':
        return Slot.TWO if self == Slot.ONE else Slot.ONE

    @property
    def token(self) -> Token:
        return Token.YELLOW if self == Slot.ONE else Token.RED

    @classmethod
    def from_token(cls, token: Token) -> 'Slot':
        if token == Token.YELLOW:
            return Slot.ONE
        elif token == Token.RED:
            return Slot.TWO
        raise ValueError("An empty cell has no slot")


class GameResult(Enum):
    """Outcome of a game as seen after the last drop."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Slot]:
        if self == GameResult.PLAYER_ONE_WIN:
            return Slot.ONE
        elif self == GameResult.PLAYER_TWO_WIN:
            return Slot.TWO
        return None

    @classmethod
    def win_for(cls, token: Token) -> 'GameResult':
        if Slot.from_token(token) == Slot.ONE:
            return cls.PLAYER_ONE_WIN
        return cls.PLAYER_TWO_WIN


class Direction(Enum):
    """The four axes scanned for an alignment."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


# (d_column, d_row) step for each axis
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1),
}


def is_valid_position(column: int, row: int) -> bool:
    """True when (column, row) lies inside the area."""
    return 0 <= column < AREA_COLS and 0 <= row < AREA_ROWS


def is_valid_column(column: int) -> bool:
    return 0 <= column < AREA_COLS


def empty_grid() -> np.ndarray:
    return np.full((AREA_ROWS, AREA_COLS), Token.EMPTY.value, dtype=np.int8)


def column_heights(grid: np.ndarray) -> List[int]:
    """Number of tokens stacked in each column of ``grid``."""
    return [int(np.count_nonzero(grid[:, col])) for col in range(grid.shape[1])]


def render_area_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art, top row first, with column numbers as header.

    Args:
        grid: Area grid indexed ``grid[row, column]``, row 0 at the bottom

    Returns:
        Multi-line string representation
    """
    rows, cols = grid.shape
    separator = "-" * (4 * cols + 1)

    lines = ["|" + "|".join(f"{col:^3}" for col in range(cols)) + "|", separator]
    for row in range(rows - 1, -1, -1):
        cells = []
        for col in range(cols):
            token = Token(int(grid[row, col]))
            cells.append(" " * 3 if token == Token.EMPTY else f" {token.symbol} ")
        lines.append("|" + "|".join(cells) + "|")
    lines.append(separator)

    return "\n".join(lines)
