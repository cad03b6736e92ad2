"""
Immutable game state and the game loop built on top of the board engine.

The state is explicit and passed through functions: each call returns a new ``GameState`` that
the caller keeps in place of the old one.
"""

import logging
from typing import NamedTuple

from numpy import array_equal, ndarray
from numpy.random import Generator

from tileslide.core.gameboard import (
    BOARD_SIZE,
    apply_move,
    compute_score,
    create_initial_board,
    has_available_moves,
    spawn_tile,
)
from tileslide.core.gamemove import Direction

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameState(NamedTuple):
    """
    Immutable game state container.

    Attributes
    ----------
    board : ndarray
        The game board.
    score : int
        Sum of all tiles on the board.
    game_over : bool
        Whether no move can change the board any more.
    """

    board: ndarray
    score: int
    game_over: bool


def from_board(board: ndarray) -> GameState:
    """
    Build a state from a board, deriving its score and terminal flag.

    The board is copied and frozen, so later edits to the caller's array do not reach the state.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    GameState
        State holding a read-only copy of the board.
    """
    board = board.copy()
    board.flags.writeable = False
    return GameState(board=board, score=compute_score(board), game_over=not has_available_moves(board))


def new_game(rng: Generator, size: int = BOARD_SIZE, number_tile: int = 2) -> GameState:
    """
    Start a new game.

    Parameters
    ----------
    rng : Generator
        Source of randomness for the starting tiles.
    size : int, optional
        The side length of the board (default is 4).
    number_tile : int, optional
        Number of starting tiles (default is 2).

    Returns
    -------
    GameState
        Initial state with ``number_tile`` random tiles.
    """
    return from_board(create_initial_board(rng, size=size, number_tile=number_tile))


def step(state: GameState, direction: Direction, rng: Generator) -> tuple[GameState, bool]:
    """
    Play one move.

    Parameters
    ----------
    state : GameState
        Current game state.
    direction : Direction
        Direction of the move.
    rng : Generator
        Source of randomness for the spawned tile.

    Returns
    -------
    tuple[GameState, bool]
        - The state after the move, or ``state`` itself if the move was not accepted.
        - Whether the move was accepted.

    Notes
    -----
    - Moves on a finished game are rejected.
    - A move that leaves the board unchanged is rejected and spawns nothing.
    - An accepted move spawns exactly one tile, then score and game over are derived from the new board.
    """
    direction = Direction(direction)

    if state.game_over:
        _logger.debug('Move %s rejected: game is over', direction.name)
        return state, False

    moved = apply_move(state.board, direction)
    if array_equal(moved, state.board):
        _logger.debug('Move %s rejected: board unchanged', direction.name)
        return state, False

    new_state = from_board(spawn_tile(moved, rng))
    if new_state.game_over:
        _logger.debug('Game over with score %d', new_state.score)
    return new_state, True
