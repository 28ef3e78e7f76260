"""
Slide and merge logic for the 2048 game.

Every direction is reduced to a left slide: the board is rotated so that the requested edge
becomes the left edge, each row is collapsed with ``merge_line``, and the board is rotated back.
"""

from enum import Enum
from typing import NamedTuple

from numpy import array_equal, asarray, int64, ndarray, rot90, zeros, zeros_like

from game2048.core.gameboard import BOARD_SIZE, check_board


class Direction(str, Enum):
    """Move direction requested by the player."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def rotations(self) -> int:
        """Number of clockwise quarter turns that bring this direction to the left edge."""
        return ROTATIONS[self]


# ##>: Clockwise quarter turns applied before the left slide.
ROTATIONS: dict[Direction, int] = {
    Direction.UP: 3,
    Direction.RIGHT: 2,
    Direction.DOWN: 1,
    Direction.LEFT: 0,
}


class MoveResult(NamedTuple):
    """
    Outcome of sliding a board in one direction.

    Attributes
    ----------
    board : ndarray
        The board after sliding and merging.
    score : int
        Sum of the tiles created by merges during this move.
    changed : bool
        Whether any cell differs from the input board.
    """

    board: ndarray
    score: int
    changed: bool


def merge_line(line) -> tuple[ndarray, int]:
    """
    Slide one line of the board to the left and merge adjacent equal values.

    Parameters
    ----------
    line : array_like
        Exactly four cell values, ordered toward the target edge.

    Returns
    -------
    merged_line : ndarray
        The collapsed line, right-padded with zeros to length 4.
    score : int
        The total score obtained from merging in this line.

    Notes
    -----
    - Zeros (empty cells) are ignored and removed before merging.
    - Merging occurs from the start of the line towards the end.
    - Each value can only be merged once per call, so ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.

    Examples
    --------
    >>> merge_line([2, 2, 4, 0])
    (array([4, 4, 0, 0]), 4)
    >>> merge_line([4, 0, 0, 4])
    (array([8, 0, 0, 0]), 8)
    """
    values = asarray(line, dtype=int64)
    if values.shape != (BOARD_SIZE,):
        raise ValueError(f'line must hold {BOARD_SIZE} values, got shape {values.shape}')

    # ##: Compact the line.
    non_zero = values[values != 0]

    # ##: Iterate over the line and merge values.
    result = []
    score = 0
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(int(non_zero[i]))
            i += 1

    if i == len(non_zero) - 1:
        result.append(int(non_zero[-1]))

    merged_line = zeros(BOARD_SIZE, dtype=int64)
    merged_line[: len(result)] = result
    return merged_line, score


def rotate_board(board: ndarray, times: int = 1) -> ndarray:
    """
    Rotate the board clockwise by quarter turns.

    One turn maps ``old[i][j]`` to ``new[j][3 - i]``. The result is always a new array.

    Parameters
    ----------
    board : ndarray
        The game board to rotate.
    times : int, optional
        Number of quarter turns (default is 1).

    Returns
    -------
    ndarray
        The rotated board.
    """
    return rot90(board, k=-(times % 4)).copy()


def slide_and_merge(board: ndarray) -> MoveResult:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    MoveResult
        The updated board, the total score from all merges, and whether any row changed.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0
    changed = False

    for i, row in enumerate(board):
        merged_row, score_row = merge_line(row)
        changed = changed or not array_equal(merged_row, row)
        score += score_row
        result[i] = merged_row

    return MoveResult(result, score, changed)


def apply_move(board: ndarray, direction: Direction | str) -> MoveResult:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. It is never modified.
    direction : Direction or str
        Direction of the move (``'up'``, ``'down'``, ``'left'`` or ``'right'``).

    Returns
    -------
    MoveResult
        The new board, the score gained, and whether the move changed anything.

    Raises
    ------
    ValueError
        If the direction is unknown or the board breaks the engine contract.
    """
    direction = Direction(direction)
    state = check_board(board)

    rotations = direction.rotations
    reduced = slide_and_merge(rotate_board(state, rotations))
    return MoveResult(rotate_board(reduced.board, (4 - rotations) % 4), reduced.score, reduced.changed)


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions in declaration order (up, down, left, right) whose move changes the board.
    """
    return [direction for direction in Direction if apply_move(board, direction).changed]


def illegal_directions(board: ndarray) -> list[Direction]:
    """Directions that leave the board unchanged; complement of ``legal_directions``."""
    legal = legal_directions(board)
    return [direction for direction in Direction if direction not in legal]
