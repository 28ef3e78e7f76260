# -*- coding: utf-8 -*-
"""
Stateful side of the 2048 game.

This module provides the `GameSession` class, which owns the board, the score and the undo history
of one game, and the move records it produces for every move that changes the board.
"""

from .records import MoveRecord, RecordFactory
from .session import GameSession, MoveOutcome, Snapshot

__all__ = ["GameSession", "MoveOutcome", "MoveRecord", "RecordFactory", "Snapshot"]
