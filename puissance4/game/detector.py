"""
detector.py - Win and draw detection

Only the four lines going through the last placed token are examined, so a
check costs at most 4 * (2 * (VICTORY_NUMBER - 1) + 1) cell reads whatever the
state of the rest of the area. Resumed positions have no last drop and are
scanned in full with scan_result.
"""

from typing import List, Set, Tuple, Union

from puissance4.debug import debug
from puissance4.exceptions import InvalidAreaError
from puissance4.utils import (DIRECTION_VECTORS, VICTORY_NUMBER, Direction,
                              GameResult, Token, is_valid_position)
from puissance4.game.area import Area, AreaView

AreaLike = Union[Area, AreaView]


def _run_through(area: AreaLike, column: int, row: int,
                 direction: Direction) -> List[Tuple[int, int]]:
    """Positions of the same-token run crossing (column, row) along ``direction``."""
    token = area.get(column, row)
    if token == Token.EMPTY:
        return []

    dc, dr = DIRECTION_VECTORS[direction]
    run = [(column, row)]

    c, r = column + dc, row + dr
    while is_valid_position(c, r) and area.get(c, r) == token:
        run.append((c, r))
        c += dc
        r += dr

    c, r = column - dc, row - dr
    while is_valid_position(c, r) and area.get(c, r) == token:
        run.insert(0, (c, r))
        c -= dc
        r -= dr

    return run


def winning_line(area: AreaLike, column: int, row: int) -> List[Tuple[int, int]]:
    """
    Get the alignment completed by the token at (column, row).

    Returns:
        The (column, row) cells of the first axis holding at least
        VICTORY_NUMBER aligned tokens, or an empty list
    """
    for direction in DIRECTION_VECTORS:
        run = _run_through(area, column, row, direction)
        if len(run) >= VICTORY_NUMBER:
            debug.trace(f"{direction.name} alignment of {len(run)} through ({column}, {row})", "detector")
            return run
    return []


def check_victory_from(area: AreaLike, column: int, row: int) -> bool:
    """True when the token at (column, row) is part of a winning alignment."""
    return bool(winning_line(area, column, row))


def aligned_tokens(area: AreaLike) -> Set[Token]:
    """Tokens owning at least one winning alignment anywhere on the area."""
    found = set()
    for column in range(area.width):
        for row in range(area.height_of(column)):
            token = area.get(column, row)
            if token not in found and check_victory_from(area, column, row):
                found.add(token)
    return found


def scan_result(area: AreaLike) -> GameResult:
    """
    Work out the result of a whole area without knowing the last drop.

    Raises:
        InvalidAreaError: if both colours hold an alignment
    """
    winners = aligned_tokens(area)
    if len(winners) > 1:
        raise InvalidAreaError("Both colours have an alignment")
    if winners:
        return GameResult.win_for(winners.pop())
    if area.is_full():
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


def detect_result(area: AreaLike, column: int, row: int) -> GameResult:
    """
    Decide whether the token just placed at (column, row) ends the game.

    A win is reported even when the same drop fills the area.
    """
    debug.start_timer("win_check")
    try:
        if check_victory_from(area, column, row):
            winner = area.get(column, row)
            debug.debug(f"{winner} wins with the token at ({column}, {row})", "detector")
            return GameResult.win_for(winner)

        if area.is_full():
            debug.debug("Area is full without alignment: draw", "detector")
            return GameResult.DRAW

        return GameResult.IN_PROGRESS
    finally:
        debug.end_timer("win_check", "detector")
