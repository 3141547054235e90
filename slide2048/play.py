# -*- coding: utf-8 -*-
"""
Play 2048, either in a Matplotlib window or in the terminal.
"""
import argparse
import logging
import sys
from typing import Any, Optional, TextIO

from numpy import ndarray

from slide2048.config import GameConfiguration, configure_logging
from slide2048.controls import direction_from_key
from slide2048.envs import TwentyFortyEight
from slide2048.utils import WindowBoard

logger = logging.getLogger(__name__)

RESET_KEYS = ("r", "backspace")
GAME_OVER_MESSAGE = "Game Over"


def redraw(window: WindowBoard, grid: ndarray, finished: bool = False):
    """
    Redraw the game grid.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game grid

    grid: np.ndarray
        Game grid to draw

    finished: bool
        Whether to display the game over message
    """
    window.show_image(grid)
    window.show_message(GAME_OVER_MESSAGE if finished else "")


def reset(env: TwentyFortyEight, window: WindowBoard):
    """Reset the game and redraw the grid."""
    grid = env.reset()
    redraw(window, grid)


def step(env: TwentyFortyEight, window: WindowBoard, key: str):
    """
    Apply the move bound to a key.

    Parameters
    ----------
    env: TwentyFortyEight
        The game session

    window: WindowBoard
        Class to draw the game grid

    key: str
        Name of the pressed key
    """
    direction = direction_from_key(key)
    if direction is None:
        return

    grid, moved, finished = env.step(direction)
    if moved or finished:
        redraw(window, grid, finished)


def key_handler(env: TwentyFortyEight, window: WindowBoard, event: Any):
    """
    Handle a key press in the window.

    Parameters
    ----------
    env: TwentyFortyEight
        The game session

    window: WindowBoard
        Class to draw the game grid

    event: Any
        Matplotlib key event to handle
    """
    logger.debug("Pressed %s", event.key)

    if event.key == "escape":
        window.close()
    elif event.key in RESET_KEYS:
        reset(env, window)
    else:
        step(env, window, event.key)


def play_window(env: TwentyFortyEight):
    """Open a window on the game and run the Matplotlib event loop until it is closed."""
    window = WindowBoard(title="2048 Game", size=env.size)
    window.register_key_handler(lambda event: key_handler(env, window, event))
    redraw(window, env.board, env.is_finished)

    # Blocking event loop
    window.show(block=True)


def play_console(env: TwentyFortyEight, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Play in the terminal, reading one key name per line.

    Parameters
    ----------
    env : TwentyFortyEight
        The game session.
    stdin : TextIO, optional
        Input stream (default is ``sys.stdin``).
    stdout : TextIO, optional
        Output stream (default is ``sys.stdout``).

    Returns
    -------
    int
        Number of moves that changed the grid.

    Notes
    -----
    Keys are the arrows names (``left``, ``up``, ...) or ``w``/``a``/``s``/``d``; ``r`` starts a new game. Any other
    key, or the end of the input, quits.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    moves = 0
    env.render(stdout)
    for line in stdin:
        key = line.strip().lower()
        if key == "r":
            env.reset()
            env.render(stdout)
            continue

        direction = direction_from_key(key)
        if direction is None:
            break

        _, moved, _ = env.step(direction)
        moves += int(moved)
        env.render(stdout)
    return moves


def main(argv: Optional[list[str]] = None) -> int:
    """Command line entry point."""
    parser = argparse.ArgumentParser(description="Play the 2048 sliding-tile puzzle")
    parser.add_argument("--size", help="Side length of the grid", type=int, default=4)
    parser.add_argument("--seed", help="Seed of the tile spawner", type=int, default=None)
    parser.add_argument("--console", help="Play in the terminal instead of a window", action="store_true")
    parser.add_argument("--log-level", help="Logging level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    try:
        config = GameConfiguration(size=args.size, seed=args.seed, log_level=args.log_level)
    except ValueError as error:
        parser.error(str(error))
    configure_logging(config.log_level)

    env = TwentyFortyEight(config)
    if args.console:
        play_console(env)
    else:
        play_window(env)
    return 0


if __name__ == "__main__":
    sys.exit(main())
