# -*- coding: utf-8 -*-
"""
Sliding-tile 2048 puzzle: a pure game core and a thin playable shell around it.
"""

from .core import Direction, create_initial_grid, grids_equal, is_terminal, spawn_tile, transform
from .envs import GameStatus, TwentyFortyEight

__all__ = [
    "Direction",
    "create_initial_grid",
    "transform",
    "spawn_tile",
    "is_terminal",
    "grids_equal",
    "TwentyFortyEight",
    "GameStatus",
]
