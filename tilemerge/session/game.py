"""Game session: score, win target, status and undo history around a board."""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from numpy.random import Generator, default_rng

from tilemerge.core.gameboard import Board, spawn_tile
from tilemerge.core.gamemove import Direction
from tilemerge.session.config import DEFAULT_MODE, SessionConfig, validate_mode, validate_spawn_probabilities

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Terminal or non-terminal classification of a session."""

    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


class Snapshot(NamedTuple):
    """State restored by an undo."""

    board: Board
    score: int


class SessionView(NamedTuple):
    """Everything a host needs to render the session after a command."""

    board: tuple[tuple[int, ...], ...]
    score: int
    status: GameStatus
    mode: int
    can_undo: bool
    max_tile: int


class GameSession:
    """
    A single game of the merge puzzle.

    The session accepts four commands (``move``, ``undo``, ``reset`` and ``set_mode``)
    and exposes the board, score, status and undo availability after each of them.
    A command either changes the state or is a no-op; well-formed commands never fail.
    """

    def __init__(
        self,
        mode: int = DEFAULT_MODE,
        rng: Generator | None = None,
        seed: int | None = None,
        spawn_probabilities: dict[int, float] | None = None,
    ):
        """
        Start a new game.

        Parameters
        ----------
        mode : int, optional
            The tile value that wins the game (default is 2048).
        rng : Generator, optional
            Random number generator used for tile spawning. Takes precedence over ``seed``.
        seed : int, optional
            Seed for a new generator when ``rng`` is not given.
        spawn_probabilities : dict[int, float], optional
            Spawned tile values and their probabilities (default is 2 at 0.9, 4 at 0.1).
        """
        self._mode = validate_mode(mode)
        self._rng = rng if rng is not None else default_rng(seed)
        self._spawn_probabilities = (
            validate_spawn_probabilities(spawn_probabilities) if spawn_probabilities is not None else None
        )

        self._board = Board.empty()
        self._score = 0
        self._status = GameStatus.IN_PROGRESS
        self._history: list[Snapshot] = []

        self.reset()

    @classmethod
    def from_config(cls, config: SessionConfig, rng: Generator | None = None) -> GameSession:
        """Start a new game from a ``SessionConfig``."""
        return cls(
            mode=config.mode,
            rng=rng,
            seed=config.seed,
            spawn_probabilities=config.spawn_probabilities,
        )

    @property
    def board(self) -> Board:
        return self._board

    @property
    def score(self) -> int:
        return self._score

    @property
    def mode(self) -> int:
        return self._mode

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_finished(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def can_undo(self) -> bool:
        """True if at least one move can be undone."""
        return bool(self._history)

    @property
    def history_depth(self) -> int:
        return len(self._history)

    def view(self) -> SessionView:
        """
        Snapshot of the state a host renders.

        Returns
        -------
        SessionView
            Grid values, score, status, mode, undo availability and the largest tile.
        """
        return SessionView(
            board=self._board.rows(),
            score=self._score,
            status=self._status,
            mode=self._mode,
            can_undo=self.can_undo,
            max_tile=self._board.max_tile(),
        )

    def move(self, direction: Direction | int | str) -> bool:
        """
        Apply a move, spawn a tile and update the status.

        Parameters
        ----------
        direction : Direction, int or str
            The move to apply.

        Returns
        -------
        bool
            True if the board changed, False if the move was a no-op.

        Notes
        -----
        - Moves are rejected once the game is won or lost.
        - A move that changes nothing leaves score, board, status and history untouched.
        - Reaching the mode value wins even if the same move leaves no move available.
        """
        direction = Direction.parse(direction)
        if self._status is not GameStatus.IN_PROGRESS:
            logger.debug('Move %s rejected, game is %s', direction.name, self._status.value)
            return False

        # ##: Save the state before the move.
        self._history.append(Snapshot(board=self._board, score=self._score))

        outcome = self._board.apply(direction)
        if not outcome.changed:
            self._history.pop()
            logger.debug('Move %s changed nothing', direction.name)
            return False

        # ##: Commit the move and add a tile.
        self._board = spawn_tile(outcome.board, self._rng, self._spawn_probabilities)
        self._score += outcome.score

        # ##>: Win is checked before loss.
        if self._board.contains(self._mode):
            self._status = GameStatus.WON
        elif not self._board.has_any_move():
            self._status = GameStatus.LOST
        else:
            self._status = GameStatus.IN_PROGRESS

        logger.debug(
            'Move %s scored %d (total %d), status %s', direction.name, outcome.score, self._score, self._status.value
        )
        return True

    def undo(self) -> bool:
        """
        Restore the board and score saved before the last move.

        Returns
        -------
        bool
            True if a move was undone, False if the history was empty.
        """
        if not self._history:
            return False

        snapshot = self._history.pop()
        self._board = snapshot.board
        self._score = snapshot.score
        self._status = GameStatus.IN_PROGRESS

        logger.debug('Undo, score back to %d, %d moves left to undo', self._score, len(self._history))
        return True

    def reset(self) -> None:
        """Discard the history and start over from a board with two tiles."""
        self._history.clear()
        self._score = 0
        self._status = GameStatus.IN_PROGRESS

        board = Board.empty()
        for _ in range(2):
            board = spawn_tile(board, self._rng, self._spawn_probabilities)
        self._board = board

        logger.debug('New game with mode %d', self._mode)

    def set_mode(self, mode: int) -> None:
        """
        Change the win target and start a new game.

        Raises
        ------
        InvalidModeError
            If ``mode`` is not a power of two greater than or equal to 4.
        """
        self._mode = validate_mode(mode)
        logger.debug('Mode set to %d', self._mode)
        self.reset()
