"""
Core functionality of the tile board: row passes, directional moves, tile spawning, score and
terminal-state detection.

Every function is pure: boards passed in are never modified and a new array is returned. The only
source of randomness is the ``Generator`` handed to ``spawn_tile``.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, int64, integer, issubdtype, ndarray, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from tileslide.core.gamemove import Direction, denormalize, normalize

# ##>: Default board side length.
BOARD_SIZE = 4

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Tile values and probabilities for sampling, in matching order.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


class InvalidBoardError(ValueError):
    """Raised when a board breaks the shape or value invariants."""


def new_generator(seed: int | None = None) -> Generator:
    """
    Create a random generator suitable for ``spawn_tile``.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games. A fresh entropy seed is used when None.

    Returns
    -------
    Generator
        A NumPy generator backed by PCG64DXSM.
    """
    return default_rng(PCG64DXSM(seed))


def check_board(board: ndarray) -> None:
    """
    Validate that a board is a square grid of zeros and powers of two.

    Parameters
    ----------
    board : ndarray
        The board to check.

    Raises
    ------
    InvalidBoardError
        If the board is not a square 2D grid of integers, or holds a negative or non-power-of-two value.
    """
    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise InvalidBoardError(f'Board must be a square grid, got shape {board.shape}')
    if not issubdtype(board.dtype, integer):
        raise InvalidBoardError(f'Board must hold integers, got dtype {board.dtype}')
    if np_any(board < 0):
        raise InvalidBoardError('Board holds negative values')
    tiles = board[board != 0]
    if np_any(tiles & (tiles - 1)):
        raise InvalidBoardError('Board holds values that are not powers of two')


def compress(row: ndarray) -> ndarray:
    """
    Move every tile of a row to the left, keeping their relative order.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one line of the board.

    Returns
    -------
    ndarray
        A new row with the non-zero values first, padded on the right with zeros.
    """
    tiles = row[row != 0]
    result = zeros_like(row)
    result[: len(tiles)] = tiles
    return result


def merge(row: ndarray) -> ndarray:
    """
    Merge adjacent equal tiles of a row in a single left-to-right sweep.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one line of the board, usually already compressed.

    Returns
    -------
    ndarray
        A new row where each merged pair became one doubled tile on the left and an empty cell on the right.

    Notes
    -----
    - A doubled tile is skipped, so each tile merges at most once per move.
    - Ties are resolved from the left: ``[2, 2, 2]`` gives ``[4, 0, 2]``.
    - The result may contain gaps; compress it again to get a slid row.
    """
    result = row.copy()
    i = 0
    while i < len(result) - 1:
        if result[i] != 0 and result[i] == result[i + 1]:
            result[i] *= 2
            result[i + 1] = 0
            i += 2
        else:
            i += 1
    return result


def slide_row(row: ndarray) -> ndarray:
    """
    Slide a row to the left: compress, merge, compress.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one line of the board.

    Returns
    -------
    ndarray
        The row after the move.

    Example
    -------
    >>> from numpy import array
    >>> slide_row(array([2, 0, 2, 2]))
    array([4, 2, 0, 0])
    """
    return compress(merge(compress(row)))


def slide_and_merge(board: ndarray) -> ndarray:
    """
    Slide every row of the board to the left.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    ndarray
        A new board after sliding and merging each row.

    Notes
    -----
    For other directions, normalize the board before calling this function.
    """
    result = zeros_like(board)
    for i, row in enumerate(board):
        result[i] = slide_row(row)
    return result


def apply_move(board: ndarray, direction: Direction) -> ndarray:
    """
    Compute the board obtained by moving every tile in a direction.

    Parameters
    ----------
    board : ndarray
        The current game board.
    direction : Direction
        Direction of the move.

    Returns
    -------
    ndarray
        A new board after sliding and merging.

    Notes
    -----
    - No tile is spawned; callers compare the result with ``board`` and only spawn when it changed.
    - Moving the result again in the same direction only changes it if the first move created a new equal pair.
    """
    if __debug__:
        check_board(board)

    direction = Direction(direction)
    moved = slide_and_merge(normalize(board, direction))
    return denormalize(moved, direction).copy()


def spawn_tile(board: ndarray, rng: Generator) -> ndarray:
    """
    Place one new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current game board. Not modified.
    rng : Generator
        Source of randomness for the cell and the tile value.

    Returns
    -------
    ndarray
        A copy of the board with one new tile, or an unchanged copy if the board is full.

    Notes
    -----
    - Every empty cell is equally likely.
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    """
    if __debug__:
        check_board(board)

    state = board.copy()
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return state

    cell = available_cells[rng.integers(len(available_cells))]
    state[tuple(cell)] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return state


def create_initial_board(rng: Generator, size: int = BOARD_SIZE, number_tile: int = 2) -> ndarray:
    """
    Create a board for a new game.

    Parameters
    ----------
    rng : Generator
        Source of randomness for the starting tiles.
    size : int, optional
        The side length of the square grid (default is 4).
    number_tile : int, optional
        Number of starting tiles (default is 2).

    Returns
    -------
    ndarray
        An empty board with ``number_tile`` tiles placed by ``spawn_tile``.
    """
    board = zeros((size, size), dtype=int64)
    for _ in range(number_tile):
        board = spawn_tile(board, rng)
    return board


def compute_score(board: ndarray) -> int:
    """
    Compute the score of a board as the sum of all its tiles.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    int
        Sum of every cell value.
    """
    return int(board.sum())


def has_available_moves(board: ndarray) -> bool:
    """
    Check whether at least one more move can change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if an empty cell or two adjacent equal tiles exist, False when the game is over.
    """
    if not np_all(board != 0):
        return True
    return bool(np_any(board[:-1] == board[1:]) or np_any(board[:, :-1] == board[:, 1:]))
