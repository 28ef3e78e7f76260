# -*- coding: utf-8 -*-
"""
Play 2048 with the keyboard.

Arrow keys move the tiles, ``u`` undoes the last move, ``backspace`` starts a new game and
``escape`` closes the window.
"""
import logging
from typing import Any

from game2048.core import Direction
from game2048.session import GameSession, MoveRecord
from game2048.utils.windows import WindowBoard

# ##: Keys understood by the window, besides the arrow keys.
UNDO_KEYS = {"u", "U"}

_logger = logging.getLogger(__name__)


def status(session: GameSession) -> str:
    """
    Describe the state of the game.

    Parameters
    ----------
    session: GameSession
        The game being played

    Returns
    -------
    str
        "Game over!", "You win!" or an empty string
    """
    if session.is_finished:
        return "Game over!"
    if session.is_won:
        return "You win!"
    return ""


def redraw(window: WindowBoard, session: GameSession):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    session: GameSession
        The game being played
    """
    window.show_board(session.board, session.score, status(session))


def reset(session: GameSession, window: WindowBoard, records: list[MoveRecord]):
    """
    Start a new game and redraw the board.

    Parameters
    ----------
    session: GameSession
        The game being played

    window: WindowBoard
        Class to draw the game board

    records: list[MoveRecord]
        Records of the current game, cleared
    """
    session.initialize()
    records.clear()
    redraw(window, session)


def step(session: GameSession, window: WindowBoard, records: list[MoveRecord], direction: Direction):
    """
    Apply a move, spawn a tile when the board changed, then redraw.

    Parameters
    ----------
    session: GameSession
        The game being played

    window: WindowBoard
        Class to draw the game board

    records: list[MoveRecord]
        Records of the current game

    direction: Direction
        Direction to apply
    """
    if session.is_finished:
        return

    outcome = session.apply_move(direction)
    if outcome.changed:
        session.spawn_random_tile()
        records.append(outcome.record)
        print(f"{outcome.record.identifier}: {direction.value} +{outcome.score_gained} (score={session.score})")

    redraw(window, session)


def undo(session: GameSession, window: WindowBoard):
    """
    Undo the last move and redraw the board.

    Parameters
    ----------
    session: GameSession
        The game being played

    window: WindowBoard
        Class to draw the game board
    """
    restored = session.undo()
    if restored is None:
        print("nothing to undo")
        return
    redraw(window, session)


def key_handler(session: GameSession, window: WindowBoard, records: list[MoveRecord], event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game being played

    window: WindowBoard
        Class to draw the game board

    records: list[MoveRecord]
        Records of the current game

    event: Any
        event to handle
    """
    _logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(session, window, records)
        return None

    if event.key in UNDO_KEYS:
        undo(session, window)
        return None

    if event.key in {direction.value for direction in Direction}:
        step(session, window, records, Direction(event.key))
        return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    game = GameSession()
    game_records: list[MoveRecord] = []

    window_board = WindowBoard(title="2048 Game", size=game.config.size)
    window_board.register_key_handler(lambda event: key_handler(game, window_board, game_records, event))

    redraw(window_board, game)

    # Blocking event loop
    window_board.show(block=True)
    print(f"Moves recorded: {len(game_records)}, final score: {game.score}")
