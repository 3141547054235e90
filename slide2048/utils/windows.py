# -*- coding: utf-8 -*-
"""
Graphical window for the 2048 game.

This module draws a game grid with Matplotlib and forwards the key presses of the window to a handler. It knows
nothing about the rules: the caller hands it grids to display.
"""
from typing import Callable

from matplotlib import pyplot as plt
from numpy import ndarray


class WindowBoard:
    """
    A class for rendering the 2048 game grid using Matplotlib.

    Methods
    -------
    show_image(grid: np.ndarray)
        Update the display with the current grid.
    show_message(message: str)
        Display a message above the grid (empty string clears it).
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
    }
    DEFAULT_COLOR = "#3C3A32"

    def __init__(self, title: str, size: int):
        """
        Initialize the game window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The side length of the grid (e.g., 4 for a 4x4 grid).
        """
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)

    def _setup_axes(self, size: int):
        """
        Create one subplot per cell of the grid.

        Parameters
        ----------
        size : int
            The side length of the grid.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.92, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])
        self.title = self.fig.suptitle("", color="#D62728", fontweight="bold")

    def _refresh(self):
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def show_image(self, grid: ndarray):
        """
        Show or update the game grid.

        Parameters
        ----------
        grid : ndarray
            The grid to display.

        Notes
        -----
        Tiles above 2048 share a single dark color.
        """
        for ax, text, value in zip(self.axes, self.texts, grid.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color("#776E65" if value in (2, 4) else "#F9F6F2")
            ax.set_facecolor(self.COLORS.get(value, self.DEFAULT_COLOR))
        self._refresh()

    def show_message(self, message: str):
        """Display a message above the grid."""
        self.title.set_text(message)
        self._refresh()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function called with the Matplotlib event whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
