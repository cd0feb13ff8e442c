"""
area.py - The Puissance 4 playing area

This module implements the Area class, which stores the tokens of a game and
enforces the gravity rule, and AreaView, the read-only window on an Area that
players and renderers receive.
"""

from typing import List

import numpy as np

from puissance4.debug import debug
from puissance4.exceptions import (ColumnFullError, InvalidAreaError,
                                   NotATokenError, OutOfBoundsError)
from puissance4.utils import (AREA_COLS, AREA_ROWS, Token, column_heights,
                              empty_grid, is_valid_column, is_valid_position,
                              render_area_ascii)

ROW_SEPARATOR = "/"


class Area:
    """
    The Puissance 4 grid.

    Cells are addressed as (column, row), row 0 being the bottom of the area.
    Tokens only enter the area through :meth:`drop`, so a column is always a
    contiguous stack starting at row 0.
    """

    width = AREA_COLS
    height = AREA_ROWS

    def __init__(self):
        self.reset()

    def reset(self):
        """Remove every token."""
        debug.debug("Resetting area", "area")
        self._grid = empty_grid()
        self._heights = [0] * AREA_COLS

    def copy(self) -> 'Area':
        new_area = Area.__new__(Area)
        new_area._grid = self._grid.copy()
        new_area._heights = list(self._heights)
        return new_area

    def view(self) -> 'AreaView':
        return AreaView(self)

    def _check_column(self, column: int):
        if not is_valid_column(column):
            raise OutOfBoundsError(f"Column {column} is outside [0, {AREA_COLS})")

    def get(self, column: int, row: int) -> Token:
        """
        Get the content of a cell.

        Raises:
            OutOfBoundsError: if (column, row) is outside the area
        """
        if not is_valid_position(column, row):
            raise OutOfBoundsError(f"Position ({column}, {row}) is outside the {AREA_COLS}x{AREA_ROWS} area")
        return Token(int(self._grid[row, column]))

    def __getitem__(self, position) -> Token:
        column, row = position
        return self.get(column, row)

    def height_of(self, column: int) -> int:
        """Number of tokens already stacked in ``column``."""
        self._check_column(column)
        return self._heights[column]

    def is_filled_column(self, column: int) -> bool:
        self._check_column(column)
        return self._heights[column] >= AREA_ROWS

    def available_columns(self) -> List[int]:
        return [col for col in range(AREA_COLS) if self._heights[col] < AREA_ROWS]

    def is_full(self) -> bool:
        return all(h >= AREA_ROWS for h in self._heights)

    def is_empty(self) -> bool:
        return not any(self._heights)

    def drop(self, column: int, token: Token) -> int:
        """
        Drop a token in a column.

        Args:
            column: Target column (0-indexed)
            token: Token to place, YELLOW or RED

        Returns:
            The row where the token landed

        Raises:
            NotATokenError: if ``token`` is EMPTY
            OutOfBoundsError: if the column does not exist
            ColumnFullError: if the column has no room left (area unchanged)
        """
        if not isinstance(token, Token) or token == Token.EMPTY:
            raise NotATokenError(f"{token!r} is not a token")

        self._check_column(column)

        row = self._heights[column]
        if row >= AREA_ROWS:
            debug.debug(f"Refusing drop in full column {column}", "area")
            raise ColumnFullError(column)

        self._grid[row, column] = token.value
        self._heights[column] = row + 1
        debug.trace(f"{token} token placed at ({column}, {row})", "area")
        return row

    @property
    def cells(self) -> np.ndarray:
        """Copy of the underlying grid, indexed ``[row, column]``."""
        return self._grid.copy()

    def to_string(self) -> str:
        """
        Serialize the area, top row first, rows separated by slashes.

        ex) an area with a single yellow token in column 3:
        ......./......./......./......./......./...Y...
        """
        return ROW_SEPARATOR.join(
            "".join(Token(int(self._grid[row, col])).symbol for col in range(AREA_COLS))
            for row in range(AREA_ROWS - 1, -1, -1)
        )

    @classmethod
    def from_string(cls, text: str) -> 'Area':
        """
        Rebuild an area serialized with :meth:`to_string`.

        Raises:
            InvalidAreaError: on wrong dimensions, unknown symbols or floating tokens
        """
        rows = text.strip().split(ROW_SEPARATOR)
        if len(rows) != AREA_ROWS or any(len(r) != AREA_COLS for r in rows):
            raise InvalidAreaError(f"Expected {AREA_ROWS} rows of {AREA_COLS} cells: {text!r}")

        grid = empty_grid()
        for row_idx, row_text in enumerate(rows):
            # the text starts with the top row
            row = AREA_ROWS - 1 - row_idx
            for col, symbol in enumerate(row_text):
                try:
                    grid[row, col] = Token.from_symbol(symbol).value
                except ValueError as e:
                    raise InvalidAreaError(str(e)) from e

        heights = column_heights(grid)
        for col, h in enumerate(heights):
            if np.any(grid[h:, col] != Token.EMPTY.value):
                raise InvalidAreaError(f"Column {col} has a token floating above an empty cell")

        area = cls.__new__(cls)
        area._grid = grid
        area._heights = heights
        return area

    def render(self) -> str:
        return render_area_ascii(self._grid)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        if isinstance(other, AreaView):
            other = other._area
        if not isinstance(other, Area):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))


class AreaView:
    """
    Read-only access to an Area.

    This is what players and front ends receive: it reflects the live area but
    offers no way to modify it. Use :meth:`copy` to get a scratch Area.
    """

    __slots__ = ('_area',)

    def __init__(self, area: Area):
        self._area = area

    @property
    def width(self) -> int:
        return self._area.width

    @property
    def height(self) -> int:
        return self._area.height

    def get(self, column: int, row: int) -> Token:
        return self._area.get(column, row)

    def __getitem__(self, position) -> Token:
        return self._area[position]

    def height_of(self, column: int) -> int:
        return self._area.height_of(column)

    def is_filled_column(self, column: int) -> bool:
        return self._area.is_filled_column(column)

    def available_columns(self) -> List[int]:
        return self._area.available_columns()

    def is_full(self) -> bool:
        return self._area.is_full()

    def is_empty(self) -> bool:
        return self._area.is_empty()

    @property
    def cells(self) -> np.ndarray:
        return self._area.cells

    def copy(self) -> Area:
        return self._area.copy()

    def to_string(self) -> str:
        return self._area.to_string()

    def render(self) -> str:
        return self._area.render()

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        return self._area == other
