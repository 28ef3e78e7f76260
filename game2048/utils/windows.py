# -*- coding: utf-8 -*-
"""
Matplotlib window displaying a 2048 game session.

The window draws the board tiles, shows the score and the game status in the title bar, and
forwards key presses to a handler registered by the caller.
"""
from typing import Callable

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray


class WindowBoard:
    """
    Render a 2048 board with Matplotlib and capture keyboard input.

    Parameters
    ----------
    title : str
        The title of the window.
    size : int
        The side of the game board.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: '#CCC0B3',
        2: '#EEE4DA',
        4: '#ECE0C8',
        8: '#ECB280',
        16: '#EC8D53',
        32: '#F57C5F',
        64: '#E95937',
        128: '#F3D96B',
        256: '#F2D04A',
        512: '#E5BF2E',
        1024: '#E2B814',
        2048: '#EBC502',
        4096: '#00A2D8',
    }

    # ##: Tiles from 8 upward are drawn with light text.
    LIGHT_TEXT_FROM = 8

    def __init__(self, title: str, size: int):
        self.title = title
        self.fig = plt.figure(facecolor='#BBADA0')
        self.fig.canvas.manager.set_window_title(title)
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.9, wspace=0.05, hspace=0.05)

        self.cells = []
        for position in range(size * size):
            axe = self.fig.add_subplot(size, size, position + 1)
            axe.set_xticks([])
            axe.set_yticks([])
            text = axe.text(0.5, 0.5, '', ha='center', va='center', fontsize='x-large', fontweight='demibold')
            self.cells.append((axe, text))

        self.status = self.fig.suptitle('', fontsize='large', fontweight='bold', color='#776E65')
        self.closed = False
        self.fig.canvas.mpl_connect('close_event', self._close_handler)

    def _close_handler(self, event: Event | None = None):
        """Flag the window as closed when Matplotlib closes it."""
        self.closed = True

    def show_board(self, board: ndarray, score: int, message: str = ''):
        """
        Draw the board, the score and an optional status message.

        Parameters
        ----------
        board : ndarray
            The current state of the game board.
        score : int
            The cumulative score.
        message : str, optional
            Status appended to the score line (e.g. "You win!").
        """
        for (axe, text), value in zip(self.cells, board.flat):
            value = int(value)
            text.set_text(str(value) if value else '')
            text.set_color('#F9F6F2' if value >= self.LIGHT_TEXT_FROM else '#776E65')
            axe.set_facecolor(self.COLORS.get(value, '#3C3A32'))

        self.status.set_text(f'Score: {score}' + (f'  |  {message}' if message else ''))
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """Call ``key_handler`` with every key press event of the window."""
        self.fig.canvas.mpl_connect('key_press_event', key_handler)

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
        self.closed = True
