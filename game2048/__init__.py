# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game engine, with an undo history and move records.
"""

from game2048.core import (
    Direction,
    MoveResult,
    apply_move,
    create_empty_board,
    has_reached_target,
    is_terminal,
    legal_directions,
    spawn_random_tile,
)
from game2048.session import GameSession, MoveOutcome, MoveRecord, RecordFactory, Snapshot
from game2048.utils import GameConfiguration

__all__ = [
    "Direction",
    "GameConfiguration",
    "GameSession",
    "MoveOutcome",
    "MoveRecord",
    "MoveResult",
    "RecordFactory",
    "Snapshot",
    "apply_move",
    "create_empty_board",
    "has_reached_target",
    "is_terminal",
    "legal_directions",
    "spawn_random_tile",
]
