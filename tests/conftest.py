"""
Shared fixtures and helpers for the Puissance 4 tests.
"""

from typing import Callable, Iterable, List

import pytest

from puissance4.utils import AREA_COLS, AREA_ROWS, Token
from puissance4.game.area import Area, AreaView
from puissance4.players.base import Player


class ScriptedPlayer(Player):
    """Plays a fixed list of columns, recording what it was shown."""

    def __init__(self, name: str, columns: Iterable[int]):
        super().__init__(name)
        self.columns = list(columns)
        self.tokens_seen: List[Token] = []
        self.rejected: List[int] = []

    def choose_move(self, area: AreaView, token: Token) -> int:
        self.tokens_seen.append(token)
        return self.columns.pop(0)

    def notify_rejected(self, column, error):
        self.rejected.append(column)


class FakeTerminal:
    """Feeds scripted answers and records everything printed."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, line=""):
        self.lines.append(line)


def area_from_rows(*rows: str) -> Area:
    """Build an area from rows given top first; missing top rows are empty."""
    empty_row = "." * AREA_COLS
    padded = [empty_row] * (AREA_ROWS - len(rows)) + list(rows)
    return Area.from_string("/".join(padded))


# Full area with no four-in-a-row for either colour
DRAW_ROWS = (
    "RRYYRRY",
    "YYRRYYR",
    "RRYYRRY",
    "YYRRYYR",
    "RRYYRRY",
    "YYRRYYR",
)


@pytest.fixture
def area() -> Area:
    return Area()


@pytest.fixture
def scripted() -> Callable[[str, Iterable[int]], ScriptedPlayer]:
    return ScriptedPlayer
