"""
Move directions and move legality for the 4x4 merge puzzle.

Legality is computed on raw grids with vectorized comparisons of neighbouring
cells, so no direction needs to be simulated to know whether it would change the board.
"""

from __future__ import annotations

from enum import IntEnum

from numpy import all as np_all
from numpy import any as np_any
from numpy import ndarray

from tilemerge.core.errors import InvalidDirectionError

# ##>: Largest tile; tiles at this value no longer merge, so every value fits in int64.
MAX_TILE_VALUE = 2**61


def is_tile_value(value: int | ndarray) -> bool | ndarray:
    """
    Tell whether values are powers of two between 2 and ``MAX_TILE_VALUE``.

    Parameters
    ----------
    value : int or ndarray
        A single value, or an integer array checked element-wise.

    Returns
    -------
    bool or ndarray
        The result for a single value, or a boolean array of the same shape.
    """
    return (value >= 2) & (value <= MAX_TILE_VALUE) & ((value & (value - 1)) == 0)


class Direction(IntEnum):
    """
    Direction of a move.

    The value is the number of counter-clockwise quarter turns that bring the
    direction's origin edge to the left of the grid.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: Direction | int | str) -> Direction:
        """
        Interpret a direction given as a member, its integer value or its name.

        Parameters
        ----------
        value : Direction, int or str
            The direction to interpret. Names are case-insensitive.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        InvalidDirectionError
            If the value matches no direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as error:
                raise InvalidDirectionError(f'Unknown direction: {value!r}') from error
        try:
            return cls(value)
        except ValueError as error:
            raise InvalidDirectionError(f'Unknown direction: {value!r}') from error


def legal_directions_mask(grid: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    grid : ndarray
        The current grid.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the grid.

    Notes
    -----
    A move is legal when a tile has an empty cell on its origin side, or when two
    neighbouring tiles along the move axis hold the same value below ``MAX_TILE_VALUE``.
    """
    # ##>: Horizontal neighbours decide left/right, vertical ones decide up/down.
    left_cols, right_cols = grid[:, :-1], grid[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols) & (left_cols < MAX_TILE_VALUE)

    top_rows, bottom_rows = grid[:-1, :], grid[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows) & (top_rows < MAX_TILE_VALUE)

    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_directions(grid: ndarray) -> list[Direction]:
    """Directions that would change the grid, in enum order."""
    mask = legal_directions_mask(grid)
    return [direction for direction in Direction if mask[direction]]


def has_any_move(grid: ndarray) -> bool:
    """
    Check whether at least one move remains.

    Parameters
    ----------
    grid : ndarray
        The current grid.

    Returns
    -------
    bool
        True if the grid has an empty cell or two equal neighbouring tiles that can still merge.
    """
    if not np_all(grid != 0):
        return True
    mergeable = grid < MAX_TILE_VALUE
    vertical = (grid[:-1] == grid[1:]) & mergeable[:-1]
    horizontal = (grid[:, :-1] == grid[:, 1:]) & mergeable[:, :-1]
    return bool(np_any(vertical) or np_any(horizontal))
