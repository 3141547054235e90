from unittest import TestCase, main

import numpy as np

from slide2048.core.gameboard import grids_equal, is_terminal, transform
from slide2048.core.gamemove import Axis, Direction, can_move, illegal_directions, legal_directions


class TestDirection(TestCase):
    def test_orientation(self):
        """
        Every direction is an axis and an orientation.
        """
        self.assertEqual((Direction.LEFT.axis, Direction.LEFT.reversed), (Axis.ROW, False))
        self.assertEqual((Direction.RIGHT.axis, Direction.RIGHT.reversed), (Axis.ROW, True))
        self.assertEqual((Direction.UP.axis, Direction.UP.reversed), (Axis.COLUMN, False))
        self.assertEqual((Direction.DOWN.axis, Direction.DOWN.reversed), (Axis.COLUMN, True))

    def test_action_values(self):
        """
        Directions convert from the integer actions.
        """
        self.assertEqual([Direction(i) for i in range(4)], list(Direction))
        with self.assertRaises(ValueError):
            Direction(4)


class TestGameMove(TestCase):
    def test_illegal_directions(self):
        """
        Test if illegal directions are correctly identified.
        """
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        illegal = illegal_directions(board)
        self.assertEqual(set(illegal), {Direction.LEFT})

    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_can_move_matches_transform(self):
        """
        A direction is legal exactly when transforming along it changes the grid.
        """
        rng = np.random.default_rng(0)
        for _ in range(300):
            tiles = 2 ** rng.integers(1, 4, size=(4, 4))
            grid = np.where(rng.random((4, 4)) < 0.8, tiles, 0)
            for direction in Direction:
                self.assertEqual(can_move(grid, direction), not grids_equal(transform(grid, direction), grid))

    def test_terminal_when_no_legal_direction(self):
        """
        The game ends exactly when no direction is legal.
        """
        rng = np.random.default_rng(1)
        for _ in range(300):
            grid = 2 ** rng.integers(1, 6, size=(4, 4))
            self.assertEqual(is_terminal(grid), legal_directions(grid) == [])


if __name__ == '__main__':
    main()
