# -*- coding: utf-8 -*-
"""
This module provides the pure game logic of 2048.

It includes the move directions, the line reducer, the grid transformer, the tile spawner, the terminal-state
detector and helpers for checking legal and illegal moves.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    check_grid,
    create_initial_grid,
    empty_grid,
    grids_equal,
    is_terminal,
    next_grid,
    reduce_line,
    spawn_tile,
    transform,
)
from .gamemove import Axis, Direction, can_move, illegal_directions, legal_directions

__all__ = [
    "TILE_SPAWN_PROBS",
    "Axis",
    "Direction",
    "can_move",
    "legal_directions",
    "illegal_directions",
    "reduce_line",
    "transform",
    "spawn_tile",
    "empty_grid",
    "create_initial_grid",
    "grids_equal",
    "next_grid",
    "is_terminal",
    "check_grid",
]
