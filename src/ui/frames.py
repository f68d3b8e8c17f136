"""Borders around the title, HUD, and play-field regions.

Glyph sets are given in the order: top-left, top-right, bottom-left,
bottom-right corner, horizontal bar, vertical bar. Adjacent regions share a
border row, so the lower region's top corners are tee glyphs.
"""

from __future__ import annotations

TITLE_BORDER = "╒╕┝┥═│"
HUD_BORDER = "┝┥┝┥─│"
GAME_BORDER = "┝┥└┘─│"


def draw_bezel(screen, border: str, x: int, y: int, width: int, height: int) -> None:
    if len(border) != 6:
        raise ValueError(f"border needs 6 glyphs, got {border!r}")
    top_left, top_right, bottom_left, bottom_right, horizontal, vertical = border
    bar = horizontal * (width - 2)
    screen.write_at(x, y, top_left + bar + top_right)
    screen.write_at(x, y + height - 1, bottom_left + bar + bottom_right)
    for row in range(y + 1, y + height - 1):
        screen.write_at(x, row, vertical)
        screen.write_at(x + width - 1, row, vertical)


def draw_title_square(screen, x: int, y: int, width: int, height: int) -> None:
    draw_bezel(screen, TITLE_BORDER, x, y, width, height)


def draw_hud_square(screen, x: int, y: int, width: int, height: int) -> None:
    draw_bezel(screen, HUD_BORDER, x, y, width, height)


def draw_game_square(screen, x: int, y: int, width: int, height: int) -> None:
    draw_bezel(screen, GAME_BORDER, x, y, width, height)
