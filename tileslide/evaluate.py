# -*- coding: utf-8 -*-
"""
Play random games and report how often each maximum tile is reached.
"""
import logging
from argparse import ArgumentParser
from collections import Counter

import numpy as np
from tqdm import trange

from tileslide.config import GameConfig
from tileslide.core.gameboard import new_generator
from tileslide.envs import TwentyFortyEight

_logger = logging.getLogger(__name__)


def evaluate(config: GameConfig, length: int = 10) -> dict[int, int]:
    """
    Play games with a player that picks a random legal move.

    Parameters
    ----------
    config : GameConfig
        Settings of each game. The seed, if any, makes the whole run reproducible.
    length : int, optional
        The number of games to play (default is 10).

    Returns
    -------
    dict[int, int]
        Number of games for each maximum tile reached.
    """
    player = new_generator(config.seed)
    env = TwentyFortyEight(config)
    score = []

    with trange(length) as period:
        for num in period:
            env.reset(seed=int(player.integers(2**32)) if config.seed is not None else None)
            moves = 0

            # ##: Play a game.
            while not env.is_finished:
                actions = env.legal_actions
                if not actions:  # empty board
                    break
                env.step(actions[player.integers(len(actions))])
                moves += 1

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=env.score, max=int(np.max(env.board)))

            _logger.debug("Game %d finished after %d moves, score %d", num + 1, moves, env.score)

            # ##: Save max cells.
            score.append(int(np.max(env.board)))

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    parser = ArgumentParser(description="Play random 2048 games and report the maximum tiles reached.")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--size", type=int, default=GameConfig.size)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = evaluate(GameConfig(size=args.size, seed=args.seed), length=args.games)
    for tile, count in result.items():
        print(f"{tile}\t{count}")


if __name__ == "__main__":
    main()
