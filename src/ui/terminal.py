"""Curses-backed terminal surface.

The engine only needs a handful of primitives: absolute text placement,
play-field point drawing, partial clearing, flushing, and a blocking key
read. Drawing happens on the simulation thread; keys are read on the input
thread through a dedicated 1x1 window that is never drawn to, so the blocking
`getch` never triggers a repaint of the game screen.

Coordinates are 1-based (column x, row y), like terminal cursor addressing.
"""

from __future__ import annotations

import curses
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from config import ESC_DELAY_MS, GAME_POSITION_X, GAME_POSITION_Y, TERMINAL_HEIGHT
from core.errors import InputStreamFailure


class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ESC = auto()
    CHAR = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: Optional[str] = None


_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    27: Key.ESC,
}


def translate_key(code: int) -> KeyEvent:
    """Map a curses key code to a KeyEvent."""
    if code in _SPECIAL_KEYS:
        return KeyEvent(_SPECIAL_KEYS[code])
    if 0 <= code < curses.KEY_MIN:
        char = chr(code)
        if char.isprintable() or char in "\n\t":
            return KeyEvent(Key.CHAR, char)
    # control keys, function keys, KEY_RESIZE, ...
    return KeyEvent(Key.OTHER)


class CursesTerminal:
    def __init__(self) -> None:
        self._stdscr = None
        self._input = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    def open(self) -> None:
        if self._stdscr is not None:
            return
        stdscr = curses.initscr()
        curses.noecho()
        curses.raw()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        try:
            curses.set_escdelay(ESC_DELAY_MS)
        except (AttributeError, curses.error):
            pass
        stdscr.keypad(True)
        # Input window parked on the last row, below the play field
        self._input = curses.newwin(1, 1, max(0, min(curses.LINES, TERMINAL_HEIGHT) - 1), 0)
        self._input.keypad(True)
        self._input.timeout(-1)
        self._input.noutrefresh()
        self._stdscr = stdscr

    def close(self) -> None:
        if self._stdscr is None:
            return
        with self._lock:
            try:
                self._stdscr.clear()
                self._stdscr.refresh()
            except curses.error:
                pass
            self._stdscr.keypad(False)
            curses.noraw()
            curses.echo()
            curses.endwin()
            self._stdscr = None

    # ------------------------------------------------------------------
    def read_key(self) -> KeyEvent:
        """Block until the next key arrives."""
        if self._input is None:
            raise InputStreamFailure("terminal is not open")
        try:
            code = self._input.getch()
        except curses.error as e:
            raise InputStreamFailure(str(e)) from e
        if code == -1:
            raise InputStreamFailure("key read failed")
        return translate_key(code)

    # ------------------------------------------------------------------
    def write_at(self, x: int, y: int, text: str) -> None:
        if self._stdscr is None:
            return
        with self._lock:
            try:
                self._stdscr.addstr(y - 1, x - 1, text)
            except curses.error:
                # Writing the bottom-right cell or outside a small window
                pass

    def draw_point(self, glyph: str, x: int, y: int) -> None:
        """Draw one glyph at play-field cell (x, y); cells left of/above 1 are skipped."""
        if x < 1 or y < 1:
            return
        self.write_at(x + GAME_POSITION_X, y + GAME_POSITION_Y, glyph)

    def clear(self) -> None:
        if self._stdscr is None:
            return
        with self._lock:
            self._stdscr.erase()

    def clear_below(self, x: int, y: int) -> None:
        """Clear from (x, y) to the end of the screen."""
        if self._stdscr is None:
            return
        with self._lock:
            try:
                self._stdscr.move(y - 1, x - 1)
                self._stdscr.clrtobot()
            except curses.error:
                pass

    def move_cursor(self, x: int, y: int) -> None:
        if self._stdscr is None:
            return
        with self._lock:
            try:
                self._stdscr.move(y - 1, x - 1)
            except curses.error:
                pass

    def flush(self) -> None:
        if self._stdscr is None:
            return
        with self._lock:
            self._stdscr.refresh()
