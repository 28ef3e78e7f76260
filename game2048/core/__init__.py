# -*- coding: utf-8 -*-
"""
Core rules of the 2048 game.

It includes the board primitives (empty board, tile spawning, win and terminal checks), the line
reducer, and the rotation-based board transform shared by every move direction.
"""

from .gameboard import (
    BOARD_SIZE,
    TARGET_TILE,
    TILE_SPAWN_PROBS,
    check_board,
    create_empty_board,
    has_reached_target,
    is_terminal,
    spawn_random_tile,
)
from .gamemove import (
    Direction,
    MoveResult,
    apply_move,
    illegal_directions,
    legal_directions,
    merge_line,
    rotate_board,
    slide_and_merge,
)

__all__ = [
    "BOARD_SIZE",
    "TARGET_TILE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "MoveResult",
    "apply_move",
    "check_board",
    "create_empty_board",
    "has_reached_target",
    "illegal_directions",
    "is_terminal",
    "legal_directions",
    "merge_line",
    "rotate_board",
    "slide_and_merge",
    "spawn_random_tile",
]
