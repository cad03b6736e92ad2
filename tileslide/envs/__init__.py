# -*- coding: utf-8 -*-
"""
Game loop for the sliding-tile board.

This module provides the immutable `GameState` with its `new_game` and `step` functions, and the
`TwentyFortyEight` class that keeps a state between moves.
"""

from .gamestate import GameState, from_board, new_game, step
from .twentyfortyeight import TwentyFortyEight

__all__ = ["GameState", "TwentyFortyEight", "from_board", "new_game", "step"]
