# -*- coding: utf-8 -*-
"""
Game session of the merge puzzle.

This module provides the `GameSession` class, which owns the board, the score, the win target and the undo history.
"""

from .config import DEFAULT_MODE, MODES, SessionConfig
from .game import GameSession, GameStatus, SessionView, Snapshot

__all__ = ["GameSession", "GameStatus", "SessionView", "Snapshot", "SessionConfig", "MODES", "DEFAULT_MODE"]
