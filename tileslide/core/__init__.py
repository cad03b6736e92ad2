"""
Board engine for the sliding-tile game.

It includes the row passes (compress, merge, slide), directional moves, random tile spawning,
score computation, terminal-state detection and legal move helpers.
"""

from .gameboard import (
    BOARD_SIZE,
    TILE_SPAWN_PROBS,
    InvalidBoardError,
    apply_move,
    check_board,
    compress,
    compute_score,
    create_initial_board,
    has_available_moves,
    merge,
    new_generator,
    slide_and_merge,
    slide_row,
    spawn_tile,
)
from .gamemove import Direction, denormalize, illegal_actions, legal_actions, legal_actions_mask, normalize

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "InvalidBoardError",
    "apply_move",
    "check_board",
    "compress",
    "compute_score",
    "create_initial_board",
    "denormalize",
    "has_available_moves",
    "illegal_actions",
    "legal_actions",
    "legal_actions_mask",
    "merge",
    "new_generator",
    "normalize",
    "slide_and_merge",
    "slide_row",
    "spawn_tile",
]
