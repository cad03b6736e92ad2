"""
Configuration of a game: board size, starting tiles and random seed.
"""

from dataclasses import dataclass

from tileslide.core.gameboard import BOARD_SIZE


@dataclass
class GameConfig:
    """
    Settings used to start a game.

    Raises
    ------
    ValueError
        If the board is smaller than 2x2 or cannot hold the starting tiles.
    """

    # ##>: Board parameters.
    size: int = BOARD_SIZE  # Side length, fixed for the whole game
    initial_tiles: int = 2  # Tiles spawned on a new board

    # ##>: Reproducibility.
    seed: int | None = None  # None draws fresh entropy

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if not 0 <= self.initial_tiles <= self.size * self.size:
            raise ValueError(f'initial_tiles must be in [0, {self.size * self.size}], got {self.initial_tiles}')
