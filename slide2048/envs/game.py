"""2048 game session: the mutable shell around the pure game core."""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from numpy import ndarray
from numpy.random import default_rng

from slide2048.config import GameConfiguration
from slide2048.core.gameboard import check_grid, create_initial_grid, is_terminal, next_grid
from slide2048.core.gamemove import Direction

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """State of a game session."""

    PLAYING = 'playing'
    GAME_OVER = 'game_over'


class TwentyFortyEight:
    """
    2048 game session.

    This class owns the canonical grid of a game and replaces it wholly on every accepted move. Moves are delegated
    to the pure functions of ``slide2048.core``; the session only keeps the grid, the random source and the status.
    """

    def __init__(self, config: GameConfiguration | None = None, **kwargs):
        """
        Initialize the game and start a first session.

        Parameters
        ----------
        config : GameConfiguration, optional
            Settings of the game. Built from ``kwargs`` when not given.
        **kwargs
            Fields of ``GameConfiguration`` (``size``, ``seed``, ...).
        """
        self.config = config if config is not None else GameConfiguration(**kwargs)
        self.size = self.config.size
        self._rng = default_rng(self.config.seed)
        self._grid: ndarray | None = None
        self._status = GameStatus.PLAYING

        self.reset()

    @property
    def board(self) -> ndarray:
        """
        Get a copy of the current grid.

        Returns
        -------
        ndarray
            The current grid as a 2D numpy array.
        """
        return self._grid.copy()

    @board.setter
    def board(self, grid: ndarray):
        """
        Install an arbitrary grid, typically to resume a position.

        Raises
        ------
        ValueError
            If the grid is malformed or does not match the configured size.
        """
        grid = check_grid(grid)
        if grid.shape != (self.size, self.size):
            raise ValueError(f'grid must have shape {(self.size, self.size)}, got {grid.shape}')
        self._grid = grid.copy()
        self._update_status()

    @property
    def status(self) -> GameStatus:
        """Current status of the session."""
        return self._status

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is finished (no more moves possible), False otherwise.
        """
        return self._status is GameStatus.GAME_OVER

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new session from an empty grid with the configured number of random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the random source before spawning.

        Returns
        -------
        ndarray
            The new grid.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._grid = create_initial_grid(size=self.size, number_tile=self.config.initial_tiles, rng=self._rng)
        self._update_status()
        logger.info('New game on a %dx%d grid', self.size, self.size)
        return self.board

    def step(self, direction: Direction) -> tuple[ndarray, bool, bool]:
        """
        Apply a move to the grid.

        Parameters
        ----------
        direction : Direction
            The move to apply, either a Direction or its integer value (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        tuple[ndarray, bool, bool]
            A tuple containing:
            - The current grid (ndarray)
            - Whether the move changed the grid (bool)
            - Whether the game has finished after this move (bool)

        Notes
        -----
        - A new tile (2 or 4) is added only when the move changed the grid.
        - Once the game is over moves are refused until ``reset`` is called.
        """
        direction = Direction(direction)
        if self.is_finished:
            logger.warning('Move %s refused: the game is over', direction.name)
            return self.board, False, True

        self._grid, moved = next_grid(self._grid, direction, rng=self._rng)
        if moved:
            logger.debug('Moved %s', direction.name)
            self._update_status()
        else:
            logger.debug('Move %s has no effect', direction.name)
        return self.board, moved, self.is_finished

    def _update_status(self):
        status = GameStatus.GAME_OVER if is_terminal(self._grid) else GameStatus.PLAYING
        if status is GameStatus.GAME_OVER and self._status is not GameStatus.GAME_OVER:
            logger.info('Game over, highest tile %d', self._grid.max())
        self._status = status

    def render(self, stream: Optional[TextIO] = None) -> None:
        """
        Render the game grid. This method prints the current grid, one row per line, empty cells as dots.

        Parameters
        ----------
        stream : TextIO, optional
            Output stream (default is ``sys.stdout``).
        """
        stream = stream or sys.stdout
        for row in self._grid.tolist():
            print(' \t'.join(str(value) if value else '.' for value in row), file=stream)
        if self.is_finished:
            print('Game Over', file=stream)
        print(file=stream)
