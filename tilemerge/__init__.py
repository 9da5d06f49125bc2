# -*- coding: utf-8 -*-
"""
Engine for the 4x4 sliding-tile merge puzzle.
"""

from .core import Board, Direction, MoveOutcome
from .session import GameSession, GameStatus, SessionConfig

__all__ = ["Board", "Direction", "MoveOutcome", "GameSession", "GameStatus", "SessionConfig"]
