"""
Tests for the Matplotlib game window, drawn off screen.
"""

from unittest import TestCase, main

import matplotlib

matplotlib.use('Agg')

import numpy as np
from matplotlib import pyplot as plt

from slide2048.utils import WindowBoard


class TestWindowBoard(TestCase):
    """Test the rendering window."""

    def setUp(self):
        self.window = WindowBoard(title='2048 Game', size=4)

    def tearDown(self):
        plt.close('all')

    def test_show_image(self):
        """Cells show the tile values, empty cells show nothing."""
        grid = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4096]])
        self.window.show_image(grid)

        self.assertEqual(self.window.texts[0].get_text(), '2')
        self.assertEqual(self.window.texts[1].get_text(), '')
        self.assertEqual(self.window.texts[15].get_text(), '4096')

    def test_show_message(self):
        """The message is displayed above the grid."""
        self.window.show_message('Game Over')
        self.assertEqual(self.window.title.get_text(), 'Game Over')

    def test_close(self):
        """Closing the window releases its figure."""
        number = self.window.fig.number
        self.window.close()
        self.assertFalse(plt.fignum_exists(number))


if __name__ == '__main__':
    main()
