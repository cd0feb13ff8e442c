"""
cli.py - A human player typing moves in a terminal

Input and output functions are injectable so that the player can be driven by
something other than a real terminal (tests, a wrapper front end).
"""

from typing import Callable, Sequence

from puissance4.debug import debug
from puissance4.exceptions import NoLegalMoveError, Puissance4Error
from puissance4.utils import Token
from puissance4.game.area import AreaView
from puissance4.players.base import Player


def request(prompt: str, options: Sequence, parse: Callable = int,
            input_fn: Callable[[str], str] = input,
            output_fn: Callable[[str], None] = print):
    """
    Ask until the answer parses to one of ``options``.

    Args:
        prompt: Question shown before the option list
        options: Accepted values
        parse: Converts the raw text, may raise ValueError
        input_fn: Reads one line of text
        output_fn: Writes one line of text

    Returns:
        The accepted value
    """
    option_text = "/".join(str(o) for o in options)
    while True:
        output_fn(f"{prompt} [{option_text}]")
        raw = input_fn("> ").strip()
        try:
            value = parse(raw)
        except ValueError:
            debug.debug(f"Unparsable answer {raw!r}", "player")
            continue

        if value in options:
            return value
        debug.debug(f"Answer {value!r} not in {option_text}", "player")


class CLIPlayer(Player):
    """Human player reading columns from standard input."""

    def __init__(self, name: str,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        super().__init__(name)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def choose_move(self, area: AreaView, token: Token) -> int:
        columns = area.available_columns()
        if not columns:
            raise NoLegalMoveError(f"{self.name} has no column left to play")

        self.output_fn(f"{self.name} to play ({token.symbol})")
        self.output_fn(area.render())

        if len(columns) == 1:
            self.output_fn(f"Only one possibility: {columns[0]}")
            return columns[0]

        return request("Choose a column", columns,
                       input_fn=self.input_fn, output_fn=self.output_fn)

    def notify_rejected(self, column: int, error: Puissance4Error):
        self.output_fn(f"Move refused: {error}")
