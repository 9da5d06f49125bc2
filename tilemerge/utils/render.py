"""Plain-text rendering of boards and session views for console hosts and logs."""

from __future__ import annotations

from tilemerge.core.gameboard import Board
from tilemerge.session.game import SessionView


def render_board(board: Board | tuple[tuple[int, ...], ...]) -> str:
    """
    Render a board as one line per row.

    Parameters
    ----------
    board : Board or tuple of tuples
        The board, or its rows as exposed by ``SessionView.board``.

    Returns
    -------
    str
        The rows, cells right-aligned to the widest tile and empty cells shown as ``.``.
    """
    rows = board.rows() if isinstance(board, Board) else board
    width = max(len(str(value)) for row in rows for value in row)
    return '\n'.join(' '.join((str(value) if value else '.').rjust(width) for value in row) for row in rows)


def render_view(view: SessionView) -> str:
    """Render the board followed by score, mode and status lines."""
    lines = [
        render_board(view.board),
        f'score: {view.score}',
        f'mode: {view.mode}  max tile: {view.max_tile}',
        f'status: {view.status.value}' + ('  (undo available)' if view.can_undo else ''),
    ]
    return '\n'.join(lines)
