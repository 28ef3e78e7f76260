"""
Game session: current board, score, undo history and move records of one 2048 game.
"""

import logging
from collections import deque
from typing import NamedTuple

from numpy import ndarray
from numpy.random import default_rng

from game2048.core.gameboard import create_empty_board, has_reached_target, is_terminal, spawn_random_tile
from game2048.core.gamemove import Direction, apply_move
from game2048.session.records import MoveRecord, RecordFactory
from game2048.utils.config import GameConfiguration

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Snapshot(NamedTuple):
    """A board and the score that goes with it, as stored in the undo history."""

    board: ndarray
    score: int


class MoveOutcome(NamedTuple):
    """
    Result of a move applied to a session.

    Attributes
    ----------
    board : ndarray
        The session's live board after the move. Spawning a tile into it updates the session.
    score_gained : int
        Score obtained by the merges of this move.
    changed : bool
        Whether the move changed any cell.
    record : MoveRecord or None
        The move record, only when the board changed.
    """

    board: ndarray
    score_gained: int
    changed: bool
    record: MoveRecord | None


class GameSession:
    """
    State of one 2048 game.

    The session owns the current board, the cumulative score and a bounded undo history. It does
    not spawn tiles after moves nor decide when the game is over: callers inspect the outcome of
    ``apply_move`` and use ``spawn_random_tile``, ``is_won`` and ``is_finished`` themselves.

    Parameters
    ----------
    config : GameConfiguration, optional
        Session settings (default is ``GameConfiguration()``).
    rng : numpy.random.Generator, optional
        Source of randomness for tile spawns and record identifiers.
    seed : int, optional
        Seed of the default generator, ignored when ``rng`` is given.
    records : RecordFactory, optional
        Builder of move records (default shares the session generator).
    """

    def __init__(
        self,
        config: GameConfiguration | None = None,
        rng=None,
        seed: int | None = None,
        records: RecordFactory | None = None,
    ):
        self.config = config if config is not None else GameConfiguration()
        self._rng = rng if rng is not None else default_rng(seed)
        if records is None:
            records = RecordFactory(rng=self._rng, prefix=self.config.record_prefix)
        self._records = records

        self._board: ndarray = create_empty_board()
        self._score: int = 0
        self._history: deque[Snapshot] = deque(maxlen=self.config.history_depth)

        self.initialize()

    @property
    def board(self) -> ndarray:
        """The live game board."""
        return self._board

    @property
    def score(self) -> int:
        """Cumulative score of the game."""
        return self._score

    @property
    def history(self) -> tuple[Snapshot, ...]:
        """Copies of the undo history entries, oldest first."""
        return tuple(Snapshot(entry.board.copy(), entry.score) for entry in self._history)

    @property
    def can_undo(self) -> bool:
        """Whether ``undo`` would restore a previous state."""
        return len(self._history) > 1

    @property
    def is_won(self) -> bool:
        """Whether the target tile is on the board."""
        return has_reached_target(self._board, self.config.target_tile)

    @property
    def is_finished(self) -> bool:
        """Whether no move can change the board anymore."""
        return is_terminal(self._board)

    def initialize(self) -> ndarray:
        """
        Start a new game.

        The board is emptied and seeded with the configured number of random tiles, the score is
        reset to zero and the history holds the seeded state only.

        Returns
        -------
        ndarray
            The seeded live board.
        """
        board = create_empty_board()
        for _ in range(self.config.initial_tiles):
            spawn_random_tile(board, rng=self._rng)

        self._board = board
        self._score = 0
        self._history.clear()
        self._history.append(Snapshot(board.copy(), 0))

        _logger.debug('New game seeded with %d tiles.', self.config.initial_tiles)
        return self._board

    def spawn_random_tile(self) -> ndarray:
        """Spawn a tile on the live board with the session generator."""
        return spawn_random_tile(self._board, rng=self._rng)

    def apply_move(self, direction: Direction | str) -> MoveOutcome:
        """
        Apply a move to the current board.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move.

        Returns
        -------
        MoveOutcome
            The live board, the score gained, whether the board changed, and the move record.

        Raises
        ------
        ValueError
            If the direction is unknown.

        Notes
        -----
        - The pre-move state is pushed onto the history; beyond ``history_depth`` the oldest entry is dropped.
        - With ``record_unchanged_moves`` the snapshot is pushed even when the move changes nothing.
        """
        direction = Direction(direction)
        snapshot = Snapshot(self._board.copy(), self._score)
        result = apply_move(self._board.copy(), direction)

        # ##: Commit only once the transform has returned.
        if result.changed or self.config.record_unchanged_moves:
            self._history.append(snapshot)
        self._board = result.board
        self._score += result.score

        if not result.changed:
            _logger.debug('Move %s left the board unchanged.', direction.value)
            return MoveOutcome(self._board, result.score, False, None)

        record = self._records.create(
            board=self._board, score=self._score, direction=direction, score_gained=result.score
        )
        _logger.debug(
            'Move %s gained %d (score %d), record %s.', direction.value, result.score, self._score, record.identifier
        )
        return MoveOutcome(self._board, result.score, True, record)

    def undo(self) -> Snapshot | None:
        """
        Restore the state of the previous history entry.

        The most recent history entry is discarded and the board and score are restored from the
        entry that becomes the most recent.

        Returns
        -------
        Snapshot or None
            The restored live board and score, or None when there is nothing to undo.
        """
        if not self.can_undo:
            _logger.debug('Nothing to undo.')
            return None

        self._history.pop()
        previous = self._history[-1]
        self._board = previous.board.copy()
        self._score = previous.score

        _logger.debug('Undo restored score %d, %d entries left.', self._score, len(self._history))
        return Snapshot(self._board, self._score)
