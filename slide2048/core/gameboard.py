"""
Core functionality for the 2048 game: sliding and merging lines, moving the grid, spawning tiles and detecting the
end of the game.

Every function here is pure: grids are taken by value and a fresh grid is returned, the input is never written to.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, array_equal, asarray, int64, integer, issubdtype, ndarray, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from slide2048.core.gamemove import Direction, oriented

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator, used when the caller supplies neither a generator nor a seed.
_GENERATOR = default_rng(PCG64DXSM())


def _generator(rng: Generator | None, seed: int | None) -> Generator:
    if rng is not None:
        return rng
    return default_rng(seed) if seed is not None else _GENERATOR


def reduce_line(line: ndarray) -> ndarray:
    """
    Slide the tiles of a line towards index 0 and merge equal adjacent pairs.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column of the grid, oriented so that the target edge is index 0.

    Returns
    -------
    ndarray
        A new line of the same length, padded on the right with zeros.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the line towards the end.
    - A tile produced by a merge does not merge again: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.
    """
    result = zeros_like(line)

    # ##: Compaction.
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        result[: len(non_zero)] = non_zero
        return result

    # ##: Merge each equal pair once, left to right.
    merged = []
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged.append(non_zero[i] * 2)
            i += 2
        else:
            merged.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        merged.append(non_zero[-1])

    result[: len(merged)] = merged
    return result


def transform(grid: ndarray, direction: Direction) -> ndarray:
    """
    Move every tile of the grid in the given direction.

    Parameters
    ----------
    grid : ndarray
        The game grid.
    direction : Direction
        The direction of the move (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    ndarray
        A new grid of the same shape. It is returned even when the move changes nothing; compare it with
        ``grids_equal`` to detect a no-op move.

    Notes
    -----
    The lines of the grid are read along the direction's axis, reversed when the direction points to the high-index
    edge, reduced with ``reduce_line``, and written back through the same orientation.
    """
    grid = asarray(grid)
    direction = Direction(direction)

    result = zeros_like(grid)
    target = oriented(result, direction)
    for i, line in enumerate(oriented(grid, direction)):
        target[i] = reduce_line(line)
    return result


def spawn_tile(grid: ndarray, rng: Generator | None = None, seed: int | None = None) -> ndarray:
    """
    Place a new tile (2 or 4) on one empty cell chosen uniformly at random.

    Parameters
    ----------
    grid : ndarray
        The game grid.
    rng : Generator, optional
        Random source for the cell and the value.
    seed : int, optional
        Random number generator seed for reproducibility, used when ``rng`` is not given.

    Returns
    -------
    ndarray
        A new grid with exactly one previously empty cell set to 2 (90%) or 4 (10%). A full grid is returned
        unchanged (as a copy).
    """
    result = array(grid, copy=True)

    available_cells = argwhere(result == 0)
    if len(available_cells) == 0:
        return result

    rng = _generator(rng, seed)
    cell = available_cells[rng.integers(len(available_cells))]
    result[tuple(cell)] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return result


def empty_grid(size: int = 4) -> ndarray:
    """
    Build an all-empty grid.

    Parameters
    ----------
    size : int, optional
        Side length of the square grid (default is 4).

    Returns
    -------
    ndarray
        A ``(size, size)`` array of zeros.

    Raises
    ------
    ValueError
        If size is not positive.
    """
    if size < 1:
        raise ValueError(f'size must be > 0, got {size}')
    return zeros((size, size), dtype=int64)


def create_initial_grid(
    size: int = 4, number_tile: int = 2, rng: Generator | None = None, seed: int | None = None
) -> ndarray:
    """
    Build the grid a game starts from: an empty grid with ``number_tile`` spawned tiles.

    Parameters
    ----------
    size : int, optional
        Side length of the square grid (default is 4).
    number_tile : int, optional
        Number of tiles to spawn (default is 2).
    rng : Generator, optional
        Random source for the spawns.
    seed : int, optional
        Random number generator seed for reproducibility, used when ``rng`` is not given.

    Returns
    -------
    ndarray
        The initial grid.
    """
    rng = _generator(rng, seed)
    grid = empty_grid(size)
    for _ in range(number_tile):
        grid = spawn_tile(grid, rng=rng)
    return grid


def grids_equal(first: ndarray, second: ndarray) -> bool:
    """Structural equality of two grids."""
    return bool(array_equal(first, second))


def next_grid(
    grid: ndarray, direction: Direction, rng: Generator | None = None, seed: int | None = None
) -> tuple[ndarray, bool]:
    """
    Compute the grid after a player's move.

    Parameters
    ----------
    grid : ndarray
        The current game grid.
    direction : Direction
        The direction of the move (0: left, 1: up, 2: right, 3: down).
    rng : Generator, optional
        Random source for the spawned tile.
    seed : int, optional
        Random number generator seed for reproducibility, used when ``rng`` is not given.

    Returns
    -------
    new_grid : ndarray
        The grid after the move and, if the move changed anything, one spawned tile.
    moved : bool
        Whether the move changed the grid.
    """
    moved_grid = transform(grid, direction)
    if grids_equal(grid, moved_grid):
        return moved_grid, False
    return spawn_tile(moved_grid, rng=rng, seed=seed), True


def is_terminal(grid: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    grid : ndarray
        The game grid.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no orthogonally adjacent cells have the same value.
    Comparing each cell with its upper and left neighbours covers every adjacent pair once.
    """
    grid = asarray(grid)
    return bool(
        np_all(grid != 0) and not np_any(grid[:-1] == grid[1:]) and not np_any(grid[:, :-1] == grid[:, 1:])
    )


def check_grid(grid: ndarray) -> ndarray:
    """
    Validate that a grid is well formed.

    Parameters
    ----------
    grid : ndarray
        The grid to check.

    Returns
    -------
    ndarray
        The grid as an integer array.

    Raises
    ------
    ValueError
        If the grid is not a square 2D integer array whose cells are 0 or powers of two greater or equal to 2.
    """
    grid = asarray(grid)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.shape[0] == 0:
        raise ValueError(f'grid must be a non-empty square matrix, got shape {grid.shape}')
    if not issubdtype(grid.dtype, integer):
        raise ValueError(f'grid must hold integers, got dtype {grid.dtype}')

    tiles = grid[grid != 0]
    if np_any(tiles < 2) or np_any(tiles & (tiles - 1)):
        raise ValueError('grid cells must be 0 or a power of two >= 2')
    return grid
