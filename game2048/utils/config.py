"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass

from game2048.core.gameboard import BOARD_SIZE, TARGET_TILE


@dataclass
class GameConfiguration:
    """
    Settings of a game session.

    The board geometry is fixed by the engine; ``size`` is kept so callers such as the
    rendering window can read it from a single place.
    """

    # ##>: Board parameters.
    size: int = BOARD_SIZE  # Side of the square board
    target_tile: int = TARGET_TILE  # Tile value that wins the game
    initial_tiles: int = 2  # Tiles spawned when a game starts

    # ##>: Undo history.
    history_depth: int = 10  # Snapshots kept, oldest evicted first
    record_unchanged_moves: bool = True  # Push a snapshot even when the move changes nothing

    # ##>: Move records.
    record_prefix: str = 'move'  # Leading part of record identifiers

    def __post_init__(self):
        if self.size != BOARD_SIZE:
            raise ValueError(f'size must be {BOARD_SIZE}, got {self.size}')
        if self.target_tile < 2 or self.target_tile & (self.target_tile - 1):
            raise ValueError(f'target_tile must be a power of two greater than 1, got {self.target_tile}')
        if not 1 <= self.initial_tiles <= self.size * self.size:
            raise ValueError(f'initial_tiles must be between 1 and {self.size * self.size}, got {self.initial_tiles}')
        if self.history_depth < 1:
            raise ValueError(f'history_depth must be positive, got {self.history_depth}')
