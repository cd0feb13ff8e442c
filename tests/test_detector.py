"""Tests for win and draw detection."""

import pytest

from puissance4.game.area import Area
from puissance4.exceptions import InvalidAreaError
from puissance4.game.detector import (check_victory_from, detect_result, scan_result,
                                      winning_line)
from puissance4.utils import GameResult, Token

from conftest import DRAW_ROWS, area_from_rows


def test_horizontal_win():
    area = area_from_rows("..YYYY.")
    assert check_victory_from(area, 2, 0)
    assert detect_result(area, 5, 0) == GameResult.PLAYER_ONE_WIN
    assert winning_line(area, 4, 0) == [(2, 0), (3, 0), (4, 0), (5, 0)]


def test_vertical_win():
    area = area_from_rows(
        "R......",
        "R......",
        "R......",
        "R.YYY..",
    )
    assert detect_result(area, 0, 3) == GameResult.PLAYER_TWO_WIN
    assert winning_line(area, 0, 3) == [(0, 0), (0, 1), (0, 2), (0, 3)]


def test_diagonal_up_win():
    area = area_from_rows(
        "...Y...",
        "..YR...",
        ".YRR...",
        "YRRY...",
    )
    assert detect_result(area, 3, 3) == GameResult.PLAYER_ONE_WIN
    assert detect_result(area, 1, 1) == GameResult.PLAYER_ONE_WIN
    assert winning_line(area, 2, 2) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_diagonal_down_win():
    area = area_from_rows(
        "R......",
        "YR.....",
        "YYR....",
        "YYYR...",
    )
    assert detect_result(area, 0, 3) == GameResult.PLAYER_TWO_WIN
    assert winning_line(area, 3, 0) == [(0, 3), (1, 2), (2, 1), (3, 0)]


@pytest.mark.parametrize("rows,position", [
    (("..YYY.R",), (4, 0)),
    (("R......", "R......", "R.....Y"), (0, 2)),
    (("..Y....", ".YR....", "YRR...."), (2, 2)),
    (("R......", "YR.....", "YYR...."), (0, 2)),
])
def test_three_in_a_row_is_not_a_win(rows, position):
    area = area_from_rows(*rows)
    assert not check_victory_from(area, *position)
    assert detect_result(area, *position) == GameResult.IN_PROGRESS
    assert winning_line(area, *position) == []


def test_broken_line_is_not_a_win():
    area = area_from_rows("YYRYY..")
    assert detect_result(area, 4, 0) == GameResult.IN_PROGRESS


def test_win_found_from_middle_of_line():
    """The scan goes both ways from the placement point."""
    area = area_from_rows(".RRRRR.")
    assert detect_result(area, 3, 0) == GameResult.PLAYER_TWO_WIN
    assert len(winning_line(area, 3, 0)) == 5


def test_empty_cell_never_wins():
    area = Area()
    assert not check_victory_from(area, 3, 0)


def test_full_area_without_alignment_is_a_draw():
    area = area_from_rows(*DRAW_ROWS)
    for col in range(area.width):
        assert not check_victory_from(area, col, area.height - 1)
    assert detect_result(area, 6, 5) == GameResult.DRAW


def test_win_takes_precedence_over_draw():
    """The drop that fills the area and aligns four is a win."""
    area = area_from_rows("YYYRRR.", *DRAW_ROWS[1:])
    row = area.drop(6, Token.RED)
    assert row == 5
    assert area.is_full()
    assert detect_result(area, 6, row) == GameResult.PLAYER_TWO_WIN


def test_detector_accepts_a_view():
    area = area_from_rows("YYYY...")
    assert detect_result(area.view(), 0, 0) == GameResult.PLAYER_ONE_WIN


@pytest.mark.parametrize("rows, expected", [
    ((), GameResult.IN_PROGRESS),
    (("RRR....", "YYYY..."), GameResult.PLAYER_ONE_WIN),
    (("R......", "RY.....", "RY.....", "RYY.Y.."), GameResult.PLAYER_TWO_WIN),
    (DRAW_ROWS, GameResult.DRAW),
    (("YYYRRRR", *DRAW_ROWS[1:]), GameResult.PLAYER_TWO_WIN),
])
def test_scan_result_reads_whole_area(rows, expected):
    assert scan_result(area_from_rows(*rows)) == expected


def test_scan_result_rejects_two_winners():
    area = area_from_rows("R...Y..", "R...Y..", "R...Y..", "R...Y..")
    with pytest.raises(InvalidAreaError):
        scan_result(area)
