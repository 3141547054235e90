"""Mapping from raw key names to move directions."""

from slide2048.core.gamemove import Direction

KEY_MAPPING: dict[str, Direction] = {
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
    'w': Direction.UP,
    's': Direction.DOWN,
}


def direction_from_key(key: str | None) -> Direction | None:
    """
    Translate a key name into a direction.

    Parameters
    ----------
    key : str, optional
        Key name as reported by Matplotlib or typed in a terminal. Case and surrounding blanks are ignored.

    Returns
    -------
    Direction, optional
        The direction bound to the key, or None if the key is not bound.
    """
    if key is None:
        return None
    return KEY_MAPPING.get(key.strip().lower())
