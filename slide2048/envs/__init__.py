# -*- coding: utf-8 -*-
"""
Playable 2048 game session.

This module provides the `TwentyFortyEight` class, which holds the grid of a game and applies moves to it, and the
`GameStatus` enumeration of its states.
"""

from .game import GameStatus, TwentyFortyEight

__all__ = ["TwentyFortyEight", "GameStatus"]
