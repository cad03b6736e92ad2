# -*- coding: utf-8 -*-
"""
Sliding-tile puzzle engine implementing the 2048 mechanic.

Subpackages:
- core: pure board operations (moves, tile spawning, score, terminal detection).
- envs: game state and game loop built on the core.
"""

__version__ = "0.1.0"
