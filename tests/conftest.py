"""
Shared fixtures: a headless stand-in for the curses terminal.
"""
import os
import queue
import sys

import pytest

# Add source root to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from ui.terminal import Key, KeyEvent


class FakeTerminal:
    """Records drawing calls and serves scripted key events.

    `read_key` blocks like the real terminal until a key is pressed; an
    exception pushed with `press` is raised from the read instead.
    """

    def __init__(self, *keys):
        self._keys = queue.Queue()
        self.opened = False
        self.closed = False
        self.writes = []
        self.points = []
        self.flushes = 0
        self.press(*keys)

    def press(self, *keys):
        for key in keys:
            self._keys.put(key)

    def open(self):
        self.opened = True

    def close(self):
        self.closed = True

    def read_key(self):
        item = self._keys.get(timeout=5)
        if isinstance(item, BaseException):
            raise item
        return item

    def write_at(self, x, y, text):
        self.writes.append((x, y, text))

    def draw_point(self, glyph, x, y):
        if x < 1 or y < 1:
            return
        self.points.append((glyph, x, y))

    def clear(self):
        pass

    def clear_below(self, x, y):
        pass

    def move_cursor(self, x, y):
        pass

    def flush(self):
        self.flushes += 1

    def text(self):
        return [w[2] for w in self.writes]


ESC = KeyEvent(Key.ESC)
UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
LEFT = KeyEvent(Key.LEFT)
RIGHT = KeyEvent(Key.RIGHT)


def char(c):
    return KeyEvent(Key.CHAR, c)


@pytest.fixture
def terminal():
    return FakeTerminal()
