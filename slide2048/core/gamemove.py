"""
Move directions for the 2048 game, and helpers for determining legal and illegal moves.
"""

from enum import Enum, IntEnum

from numpy import ndarray


class Axis(Enum):
    """Axis along which the lines of a grid are extracted."""

    ROW = 'row'
    COLUMN = 'column'


class Direction(IntEnum):
    """
    Direction of a move.

    Every direction is an (axis, reversed) pair: the grid is read as lines along ``axis``, each line is optionally
    reversed so that the target edge sits at index 0, reduced, then written back.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def axis(self) -> Axis:
        """Axis the lines are taken along (rows for left/right, columns for up/down)."""
        return Axis.ROW if self in (Direction.LEFT, Direction.RIGHT) else Axis.COLUMN

    @property
    def reversed(self) -> bool:
        """Whether the target edge is the high-index end of each line."""
        return self in (Direction.RIGHT, Direction.DOWN)


def oriented(grid: ndarray, direction: Direction) -> ndarray:
    """
    Return a view of the grid whose rows are the lines of ``direction``, target edge first.

    Parameters
    ----------
    grid : ndarray
        The game grid.
    direction : Direction
        The direction of the move.

    Returns
    -------
    ndarray
        A view (never a copy) of the grid. Applying ``oriented`` to the result with the same direction gives back the
        original layout.
    """
    view = grid.T if direction.axis is Axis.COLUMN else grid
    return view[:, ::-1] if direction.reversed else view


def can_move(grid: ndarray, direction: Direction) -> bool:
    """
    Check if a move in the given direction would change the grid.

    Parameters
    ----------
    grid : ndarray
        The game grid.
    direction : Direction
        The direction to check.

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Notes
    -----
    A move is possible if, along the oriented lines, there's an empty cell before a non-empty cell,
    or if two adjacent cells have the same non-zero value.
    """
    lines = oriented(grid, Direction(direction))
    front, back = lines[:, :-1], lines[:, 1:]

    # ##>: Empty cell in front of a tile (can slide).
    can_slide = (front == 0) & (back != 0)
    if can_slide.any():
        return True

    # ##>: Two adjacent equal tiles (can merge).
    can_merge = (front != 0) & (front == back)
    return bool(can_merge.any())


def legal_directions(grid: ndarray) -> list[Direction]:
    """
    Determine the directions that change the grid.

    Parameters
    ----------
    grid : ndarray
        The game grid.

    Returns
    -------
    list[Direction]
        The legal directions, in action order.
    """
    return [direction for direction in Direction if can_move(grid, direction)]


def illegal_directions(grid: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the grid unchanged.

    Parameters
    ----------
    grid : ndarray
        The game grid.

    Returns
    -------
    list[Direction]
        The illegal directions, in action order.
    """
    return [direction for direction in Direction if not can_move(grid, direction)]
