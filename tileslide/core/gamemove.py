"""
Move utilities for the tile board, providing the direction type, the transforms that reduce every
direction to a left slide, and functions for determining legal and illegal moves.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """Direction of a move, numbered in the order the board is usually rotated."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


def normalize(board: ndarray, direction: Direction) -> ndarray:
    """
    Transform the board so that a move in ``direction`` becomes a left slide.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction
        Direction of the move.

    Returns
    -------
    ndarray
        A view of the board where each row is a line of the move, first cell in the move direction.

    Notes
    -----
    - Left: identity.
    - Right: reverse each row.
    - Up: transpose.
    - Down: transpose, then reverse each row.
    """
    if direction in (Direction.UP, Direction.DOWN):
        board = board.T
    if direction in (Direction.RIGHT, Direction.DOWN):
        board = board[:, ::-1]
    return board


def denormalize(board: ndarray, direction: Direction) -> ndarray:
    """
    Inverse of ``normalize``: bring a left-slid board back to its original orientation.

    Parameters
    ----------
    board : ndarray
        A board in normalized orientation.
    direction : Direction
        Direction used for the normalization.

    Returns
    -------
    ndarray
        A view of the board in the original orientation.
    """
    if direction in (Direction.RIGHT, Direction.DOWN):
        board = board[:, ::-1]
    if direction in (Direction.UP, Direction.DOWN):
        board = board.T
    return board


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Entry ``mask[direction]`` is True when moving in that ``Direction`` changes the board, so the
        tuple follows the enum order LEFT, UP, RIGHT, DOWN.

    Notes
    -----
    A move changes the board when a tile has an empty neighbour on the side it moves to, or when two
    equal tiles touch along the move axis. Merges only need the axis, so left and right share them, and
    so do up and down.
    """
    # ##>: Compute horizontal adjacency once for left/right.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Compute vertical adjacency once for up/down.
    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile slides when the neighbour in the move direction is empty.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that would leave the board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions whose move is a no-op.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions whose move slides or merges at least one tile.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]
