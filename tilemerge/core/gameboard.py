"""
Core functionality of the merge puzzle: line collapse, the immutable board value and tile spawning.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Iterable, NamedTuple

from numpy import any as np_any
from numpy import argwhere, array, array_equal, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import Generator

from tilemerge.core.errors import InvalidBoardError
from tilemerge.core.gamemove import MAX_TILE_VALUE, Direction, has_any_move, is_tile_value, legal_directions

logger = logging.getLogger(__name__)

BOARD_SIZE = 4

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal values in a line and compute the total score.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column, origin edge first.

    Returns
    -------
    score : int
        The sum of the values produced by merges.
    merged_line : ndarray
        The compacted line after merging; it may be shorter than the input.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging scans from the origin edge outward.
    - A merged value is never merged again in the same call, so ``[2, 2, 2]`` gives ``[4, 2]``.
    - Tiles equal to ``MAX_TILE_VALUE`` do not merge.
    """
    # ##: Compact toward the origin.
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    # ##: Merge pairs; skipping past a merged pair keeps the pass non-reentrant.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1] and non_zero[i] < MAX_TILE_VALUE:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(int(non_zero[i]))
            i += 1

    if i == len(non_zero) - 1:
        result.append(int(non_zero[-1]))

    return score, array(result, dtype=line.dtype)


def slide_and_merge(grid: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of the grid to the left, merging equal neighbours.

    Parameters
    ----------
    grid : ndarray
        The grid as a 2D array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_grid : ndarray
        A new grid; empty cells are padded on the right of each row.
    """
    result = zeros_like(grid)
    score = 0

    for i, row in enumerate(grid):
        row_score, merged_row = merge_line(row)
        score += row_score
        result[i, : len(merged_row)] = merged_row

    return score, result


def latent_state(grid: ndarray, direction: Direction) -> tuple[ndarray, int]:
    """
    Compute the grid after a move, without spawning a tile.

    Parameters
    ----------
    grid : ndarray
        The current grid.
    direction : Direction
        The move to apply.

    Returns
    -------
    new_grid : ndarray
        The grid after the move.
    score : int
        The score obtained from this move.

    Notes
    -----
    The grid is rotated so that the origin edge of ``direction`` is on the left,
    collapsed to the left, then rotated back.
    """
    rotated = rot90(grid, k=int(direction))
    score, updated = slide_and_merge(rotated)
    return rot90(updated, k=-int(direction)), score


class MoveOutcome(NamedTuple):
    """Result of applying a direction to a board."""

    board: Board
    score: int
    changed: bool


class Board:
    """
    Immutable 4x4 grid of tile values, ``0`` meaning empty.

    Every transform returns a new board, so a board can be shared freely,
    in particular by undo snapshots.
    """

    __slots__ = ('_cells',)

    def __init__(self, cells: ndarray | Iterable[Iterable[int]]):
        try:
            grid = array(cells)
        except (TypeError, ValueError, OverflowError) as error:
            raise InvalidBoardError(f'Cannot build a grid from {cells!r}') from error

        # ##>: Floats would be truncated and huge integers end up as objects.
        if grid.dtype.kind not in 'iu':
            raise InvalidBoardError(f'Cell values must be integers, got {grid.dtype}')
        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise InvalidBoardError(f'Expected a {BOARD_SIZE}x{BOARD_SIZE} grid, got shape {grid.shape}')
        if np_any(grid < 0):
            raise InvalidBoardError('Cell values must be non-negative')

        tiles = grid[grid != 0]
        if not is_tile_value(tiles).all():
            raise InvalidBoardError(
                f'Tiles must be powers of two between 2 and {MAX_TILE_VALUE}, got {sorted(set(tiles.tolist()))}'
            )

        grid = grid.astype(int64)
        grid.flags.writeable = False
        self._cells = grid

    @classmethod
    def empty(cls) -> Board:
        """Board with every cell empty."""
        return cls(zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Board:
        """
        Build a board from nested rows of values.

        Raises
        ------
        InvalidBoardError
            If the rows do not form a 4x4 grid of empty cells and powers of two.
        """
        return cls(rows)

    @property
    def cells(self) -> ndarray:
        """Read-only view of the grid."""
        return self._cells

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """The grid as nested tuples of plain integers."""
        return tuple(tuple(row) for row in self._cells.tolist())

    def apply(self, direction: Direction | int | str) -> MoveOutcome:
        """
        Slide and merge every line toward the origin edge of ``direction``.

        Parameters
        ----------
        direction : Direction, int or str
            The move to apply.

        Returns
        -------
        MoveOutcome
            The resulting board, the score delta and whether any cell changed.
            When nothing changed, the board returned is ``self`` and the delta is zero.
        """
        direction = Direction.parse(direction)
        grid, score = latent_state(self._cells, direction)
        if array_equal(grid, self._cells):
            return MoveOutcome(board=self, score=0, changed=False)
        return MoveOutcome(board=Board(grid), score=score, changed=True)

    def empty_cells(self) -> list[tuple[int, int]]:
        """Positions of empty cells in row-major order."""
        return [(int(row), int(col)) for row, col in argwhere(self._cells == 0)]

    def contains(self, value: int) -> bool:
        """True if any cell holds ``value``."""
        return bool(np_any(self._cells == value))

    def has_any_move(self) -> bool:
        """True if an empty cell or two equal neighbouring tiles exist."""
        return has_any_move(self._cells)

    def legal_directions(self) -> list[Direction]:
        """Directions whose move would change the board."""
        return legal_directions(self._cells)

    def max_tile(self) -> int:
        """Largest tile on the board, 0 when empty."""
        return int(self._cells.max())

    def place(self, position: tuple[int, int], value: int) -> Board:
        """
        Return a copy of the board with one cell set to ``value``.

        Raises
        ------
        InvalidBoardError
            If ``value`` is not a tile value or the position lies outside the grid.
        """
        if isinstance(value, bool) or not isinstance(value, Integral) or not is_tile_value(value):
            raise InvalidBoardError(f'Tiles must be powers of two between 2 and {MAX_TILE_VALUE}, got {value!r}')

        row, col = position
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise InvalidBoardError(f'Position {position} is outside the grid')

        grid = self._cells.copy()
        grid[row, col] = value
        return Board(grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f'Board({self.rows()!r})'


def spawn_tile(board: Board, rng: Generator, probabilities: dict[int, float] | None = None) -> Board:
    """
    Place one new tile on a uniformly random empty cell.

    Parameters
    ----------
    board : Board
        The board to fill.
    rng : Generator
        Random number generator drawing the cell and the value.
    probabilities : dict[int, float], optional
        Tile values and their probabilities, by default ``TILE_SPAWN_PROBS``.

    Returns
    -------
    Board
        A new board with one more tile, or ``board`` itself if no cell is empty.
    """
    empty = board.empty_cells()
    if not empty:
        logger.debug('No empty cell left, tile spawn skipped')
        return board

    probabilities = probabilities or TILE_SPAWN_PROBS
    position = empty[int(rng.integers(len(empty)))]
    value = int(rng.choice(list(probabilities), p=list(probabilities.values())))
    return board.place(position, value)
