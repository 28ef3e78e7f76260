"""
Move records produced for every move that changes the board.

A record is an immutable log entry. Callers that forward records to an external ledger attach
the submission metadata with ``MoveRecord.annotate``; the engine never reads those fields.
"""

import time
from dataclasses import dataclass, replace
from typing import Callable

from numpy import ndarray
from numpy.random import default_rng

from game2048.core.gamemove import Direction

# ##>: Alphabet of the random identifier suffix.
BASE36 = '0123456789abcdefghijklmnopqrstuvwxyz'


def epoch_millis() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True, eq=False)
class MoveRecord:
    """
    Log entry describing one successful move.

    Attributes
    ----------
    identifier : str
        Practically unique identifier, ``<prefix>-<timestamp>-<suffix>``.
    board : ndarray
        Read-only snapshot of the board right after the move (before any tile spawn).
    score : int
        Cumulative score after the move.
    direction : Direction
        Direction of the move.
    timestamp : int
        Creation time in epoch milliseconds.
    score_gained : int
        Score obtained by the merges of this move.
    tx_hash : str, optional
        External submission hash, set by the caller.
    batch_id : str, optional
        External batch identifier, set by the caller.
    submitted : bool
        Whether the caller has submitted the record.
    """

    identifier: str
    board: ndarray
    score: int
    direction: Direction
    timestamp: int
    score_gained: int
    tx_hash: str | None = None
    batch_id: str | None = None
    submitted: bool = False

    def annotate(
        self, tx_hash: str | None = None, batch_id: str | None = None, submitted: bool | None = None
    ) -> 'MoveRecord':
        """
        Return a copy of the record with ledger metadata attached.

        Arguments left to ``None`` keep their current value.
        """
        changes = {}
        if tx_hash is not None:
            changes['tx_hash'] = tx_hash
        if batch_id is not None:
            changes['batch_id'] = batch_id
        if submitted is not None:
            changes['submitted'] = submitted
        return replace(self, **changes)


class RecordFactory:
    """
    Build move records with an injectable clock and random source.

    Parameters
    ----------
    clock : Callable[[], int], optional
        Returns the current time in epoch milliseconds (default is the wall clock).
    rng : numpy.random.Generator, optional
        Draws the identifier suffix. Only ``integers`` is used.
    prefix : str, optional
        Leading part of every identifier (default is ``'move'``).
    suffix_length : int, optional
        Number of base-36 characters appended to the identifier (default is 9).
    """

    def __init__(
        self,
        clock: Callable[[], int] | None = None,
        rng=None,
        prefix: str = 'move',
        suffix_length: int = 9,
    ):
        self._clock = clock if clock is not None else epoch_millis
        self._rng = rng if rng is not None else default_rng()
        self._prefix = prefix
        self._suffix_length = suffix_length

    def identifier(self, timestamp: int) -> str:
        """Identifier made of the prefix, the timestamp and a random base-36 suffix."""
        indices = self._rng.integers(len(BASE36), size=self._suffix_length)
        suffix = ''.join(BASE36[int(index)] for index in indices)
        return f'{self._prefix}-{timestamp}-{suffix}'

    def create(self, board: ndarray, score: int, direction: Direction, score_gained: int) -> MoveRecord:
        """
        Create the record of a move.

        Parameters
        ----------
        board : ndarray
            Board after the move. A read-only copy is stored.
        score : int
            Cumulative score after the move.
        direction : Direction
            Direction of the move.
        score_gained : int
            Score obtained by this move.

        Returns
        -------
        MoveRecord
            The new record, without ledger metadata.
        """
        timestamp = int(self._clock())
        snapshot = board.copy()
        snapshot.setflags(write=False)
        return MoveRecord(
            identifier=self.identifier(timestamp),
            board=snapshot,
            score=int(score),
            direction=Direction(direction),
            timestamp=timestamp,
            score_gained=int(score_gained),
        )
