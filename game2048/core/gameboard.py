"""
Board primitives for the 2048 game: empty boards, random tile spawning, and win or terminal detection.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, asarray, int64, integer, issubdtype, ndarray, zeros
from numpy.random import PCG64DXSM, default_rng

# ##>: Board geometry and goal.
BOARD_SIZE = 4
TARGET_TILE = 2048

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def check_board(board) -> ndarray:
    """
    Validate that a board respects the engine contract.

    Parameters
    ----------
    board : array_like
        Candidate game board.

    Returns
    -------
    ndarray
        The board as a NumPy array (the same object when an integer array is given).

    Raises
    ------
    ValueError
        If the board is not 4x4, is not integer-valued, or holds a negative or non-power-of-two value.
    """
    state = asarray(board)
    if state.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {state.shape}')
    if not issubdtype(state.dtype, integer):
        raise ValueError(f'board must hold integers, got dtype {state.dtype}')

    # ##>: Zero is empty; every tile must be a positive power of two.
    invalid = (state < 0) | ((state != 0) & ((state & (state - 1)) != 0))
    if np_any(invalid):
        raise ValueError(f'board values must be zero or powers of two, got {state[invalid].tolist()}')
    return state


def create_empty_board() -> ndarray:
    """Return a 4x4 board of zeros."""
    return zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)


def spawn_random_tile(board: ndarray, rng=None) -> ndarray:
    """
    Place a new tile (2 or 4) on a uniformly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. **Modified in-place.**
    rng : numpy.random.Generator, optional
        Source of randomness. Only ``integers`` and ``random`` are used, so any object
        exposing those two methods works.

    Returns
    -------
    ndarray
        The same array reference, with a new tile when a cell was free.

    Notes
    -----
    - A full board is a normal condition: the board is returned untouched.
    - The new tile is a 2 with probability 0.9 and a 4 otherwise.
    """
    state = check_board(board)
    rng = rng if rng is not None else _GENERATOR

    # ##: Only if there are still available places.
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return state

    # ##: Uniform cell, then tile value.
    row, col = available_cells[int(rng.integers(len(available_cells)))]
    state[row, col] = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4
    return state


def has_reached_target(board: ndarray, target: int = TARGET_TILE) -> bool:
    """
    Check whether any tile equals the target value.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.
    target : int, optional
        Winning tile value (default is 2048).

    Returns
    -------
    bool
        True if at least one cell holds the target value.
    """
    return bool(np_any(check_board(board) == target))


def is_terminal(board: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    """
    state = check_board(board)
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
