# -*- coding: utf-8 -*-
"""
Play random games of 2048 and report the frequency of the max tile reached.
"""
import logging
from collections import Counter
from typing import Dict, Optional

import numpy as np
from tqdm import trange

from game2048.core import legal_directions
from game2048.session import GameSession
from game2048.utils import GameConfiguration

_logger = logging.getLogger(__name__)


def play_random_game(session: GameSession, rng: np.random.Generator) -> int:
    """
    Play a game until no move is left, choosing uniformly among the moves that change the board.

    Parameters
    ----------
    session : GameSession
        A freshly initialized session.
    rng : np.random.Generator
        Source of the move choices.

    Returns
    -------
    int
        Number of moves played.
    """
    moves = 0
    while not session.is_finished:
        legal = legal_directions(session.board)
        outcome = session.apply_move(legal[rng.integers(len(legal))])
        if outcome.changed:
            session.spawn_random_tile()
        moves += 1
    return moves


def evaluate(length: int = 10, seed: Optional[int] = None) -> Dict[int, int]:
    """
    Evaluate random play.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of the generator shared by the games and the move choices.

    Returns
    -------
    Dict[int, int]
        Number of games per max tile.
    """
    rng = np.random.default_rng(seed)
    session = GameSession(config=GameConfiguration(), rng=rng)
    score, wins = [], 0

    with trange(length) as period:
        for num in period:
            session.initialize()
            moves = play_random_game(session, rng)
            wins += int(session.is_won)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=session.score, max=int(np.max(session.board)), moves=moves)

            # ##: Save max cells.
            score.append(int(np.max(session.board)))

    _logger.info("%d games played, %d reached the target tile", length, wins)

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    result = evaluate(length=args.games, seed=args.seed)
    print(f"Random play over {args.games} games, max tiles: {result}")
