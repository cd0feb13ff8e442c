"""
exceptions.py - Errors raised by the Puissance 4 engine

Recoverable errors (a full column) are handled by the engine itself; the
others signal a fault in the caller and propagate.
"""


class Puissance4Error(Exception):
    """Base class of every error raised by the engine."""


class OutOfBoundsError(Puissance4Error, IndexError):
    """A column or row lies outside the area."""


class ColumnFullError(Puissance4Error):
    """The chosen column has no empty cell left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is already full")
        self.column = column


class NoLegalMoveError(Puissance4Error):
    """A move was requested while every column is full."""


class NotATokenError(Puissance4Error, ValueError):
    """An empty cell value was given where a token was expected."""


class InvalidPlayerSlotError(Puissance4Error, ValueError):
    def __init__(self, slot):
        super().__init__(f"Player {slot!r} does not exist. Only 1 and 2 are accepted")
        self.slot = slot


class MoveInProgressError(Puissance4Error):
    """A player was replaced while it was choosing a move."""


class GameFinishedError(Puissance4Error):
    """No move is accepted once the game has ended."""


class InvalidAreaError(Puissance4Error, ValueError):
    """A serialized area or snapshot could not be interpreted."""
