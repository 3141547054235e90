# -*- coding: utf-8 -*-
"""
Game configuration.
"""
import logging
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class GameConfiguration:
    """
    Settings of a game session.

    Attributes
    ----------
    size : int
        Side length of the square grid.
    initial_tiles : int
        Number of tiles spawned on a fresh grid.
    seed : int, optional
        Seed of the random source used for spawning. None draws fresh entropy.
    log_level : str
        Logging level name used by the command line entry point.
    """

    size: int = 4
    initial_tiles: int = 2
    seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f"size must be >= 2, got {self.size}")
        if not 0 <= self.initial_tiles <= self.size * self.size:
            raise ValueError(f"initial_tiles must be in [0, {self.size * self.size}], got {self.initial_tiles}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level: {self.log_level}")


def configure_logging(level: str = "WARNING") -> None:
    """
    Set up the root logger.

    Parameters
    ----------
    level : str, optional
        Logging level name (default is "WARNING").
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
