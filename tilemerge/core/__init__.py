# -*- coding: utf-8 -*-
"""
This module provides the board of the merge puzzle and its move rules.

It includes the immutable `Board` value, the `Direction` enum, the line collapse used by every move,
move legality and terminal checks, and the random tile spawn policy.
"""

from .errors import InvalidBoardError, InvalidDirectionError, InvalidModeError, TileMergeError
from .gameboard import (
    BOARD_SIZE,
    TILE_SPAWN_PROBS,
    Board,
    MoveOutcome,
    latent_state,
    merge_line,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import MAX_TILE_VALUE, Direction, has_any_move, is_tile_value, legal_directions, legal_directions_mask

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "MAX_TILE_VALUE",
    "is_tile_value",
    "Board",
    "Direction",
    "MoveOutcome",
    "merge_line",
    "slide_and_merge",
    "latent_state",
    "spawn_tile",
    "has_any_move",
    "legal_directions",
    "legal_directions_mask",
    "TileMergeError",
    "InvalidBoardError",
    "InvalidModeError",
    "InvalidDirectionError",
]
