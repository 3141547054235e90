"""
Tests for the input mapping and the command line front end.
"""

from io import StringIO
from types import SimpleNamespace
from unittest import TestCase, main
from unittest.mock import MagicMock, patch

import numpy as np

from slide2048.controls import direction_from_key
from slide2048.core.gamemove import Direction
from slide2048.envs import TwentyFortyEight
from slide2048.play import key_handler, main as play_main, play_console


class TestControls(TestCase):
    """Test the key to direction mapping."""

    def test_arrow_keys(self):
        """Arrow key names map onto directions."""
        self.assertEqual(direction_from_key('left'), Direction.LEFT)
        self.assertEqual(direction_from_key('right'), Direction.RIGHT)
        self.assertEqual(direction_from_key('up'), Direction.UP)
        self.assertEqual(direction_from_key('down'), Direction.DOWN)

    def test_letter_keys(self):
        """WASD keys map onto directions, whatever their case."""
        self.assertEqual(direction_from_key('w'), Direction.UP)
        self.assertEqual(direction_from_key('A'), Direction.LEFT)
        self.assertEqual(direction_from_key(' s\n'), Direction.DOWN)
        self.assertEqual(direction_from_key('d'), Direction.RIGHT)

    def test_unbound_keys(self):
        """Other keys map onto nothing."""
        self.assertIsNone(direction_from_key('q'))
        self.assertIsNone(direction_from_key(''))
        self.assertIsNone(direction_from_key(None))


class TestConsole(TestCase):
    """Test the terminal game loop."""

    def setUp(self):
        self.env = TwentyFortyEight(seed=0)
        self.env.board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])

    def test_moves_until_unknown_key(self):
        """Moves are applied until an unbound key is read."""
        output = StringIO()
        moves = play_console(self.env, stdin=StringIO('left\nq\nright\n'), stdout=output)

        self.assertEqual(moves, 1)
        self.assertEqual(self.env.board[0, 0], 4)
        self.assertIn('4', output.getvalue())

    def test_reset_key(self):
        """The reset key starts a new game."""
        moves = play_console(self.env, stdin=StringIO('r\n'), stdout=StringIO())

        self.assertEqual(moves, 0)
        self.assertEqual(np.count_nonzero(self.env.board), 2)

    def test_game_over_message(self):
        """The end of the game is announced."""
        self.env.board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        output = StringIO()
        moves = play_console(self.env, stdin=StringIO('left\n'), stdout=output)

        self.assertEqual(moves, 0)
        self.assertIn('Game Over', output.getvalue())


class TestWindowHandler(TestCase):
    """Test the window key handler with a stand-in window."""

    def setUp(self):
        self.env = TwentyFortyEight(seed=0)
        self.window = MagicMock()

    def test_escape_closes(self):
        """Escape closes the window."""
        key_handler(self.env, self.window, SimpleNamespace(key='escape'))
        self.window.close.assert_called_once()

    def test_move_redraws(self):
        """An effective move redraws the grid."""
        self.env.board = np.array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        key_handler(self.env, self.window, SimpleNamespace(key='left'))

        self.window.show_image.assert_called_once()
        self.assertEqual(self.window.show_image.call_args[0][0][0, 0], 2)

    def test_unbound_key_ignored(self):
        """Unbound keys do nothing."""
        key_handler(self.env, self.window, SimpleNamespace(key='x'))
        self.window.show_image.assert_not_called()

    def test_backspace_resets(self):
        """Backspace starts a new game and redraws it."""
        key_handler(self.env, self.window, SimpleNamespace(key='backspace'))
        self.window.show_image.assert_called_once()


class TestMain(TestCase):
    """Test the command line entry point."""

    def test_console_mode(self):
        """Console mode plays from standard input."""
        with patch('sys.stdin', StringIO('left\nup\n')), patch('sys.stdout', StringIO()) as output:
            status = play_main(['--console', '--seed', '3'])

        self.assertEqual(status, 0)
        self.assertTrue(output.getvalue())

    def test_invalid_size(self):
        """Invalid settings exit with a usage error."""
        with patch('sys.stderr', StringIO()), self.assertRaises(SystemExit):
            play_main(['--console', '--size', '1'])


if __name__ == '__main__':
    main()
