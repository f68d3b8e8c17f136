"""Value types shared by the engine and every game object.

Positions are continuous (sub-cell precision) but compare on the terminal
cell they round to, so two objects "touch" exactly when they would be drawn
on the same cell.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
from pygame.math import Vector2  # noqa: E402


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (5.5 -> 6, -5.5 -> -6)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Position:
    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._v = Vector2(float(x), float(y))

    @property
    def x(self) -> float:
        return self._v.x

    @property
    def y(self) -> float:
        return self._v.y

    def screen_coordinates(self) -> Tuple[int, int]:
        return round_half_away(self._v.x), round_half_away(self._v.y)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        v = self._v + other._v
        return Position(v.x, v.y)

    def __sub__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        v = self._v - other._v
        return Position(v.x, v.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.screen_coordinates() == other.screen_coordinates()

    def __hash__(self) -> int:
        return hash(self.screen_coordinates())

    def __str__(self) -> str:
        return f"[{self._v.x:g}, {self._v.y:g}]"

    def __repr__(self) -> str:
        return f"Position({self._v.x!r}, {self._v.y!r})"


@dataclass(frozen=True)
class Direction:
    dx: int
    dy: int

    def opposite(self) -> Direction:
        return Direction(-self.dx, -self.dy)

    def __mul__(self, scalar: float) -> Position:
        return Position(self.dx * scalar, self.dy * scalar)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return _GLYPHS.get((self.dx, self.dy), "*")


UP = Direction(0, -1)
DOWN = Direction(0, 1)
LEFT = Direction(-1, 0)
RIGHT = Direction(1, 0)

_GLYPHS = {(0, -1): "^", (0, 1): "v", (1, 0): ">", (-1, 0): "<"}


@dataclass(frozen=True)
class Speed:
    """Movement rate expressed as the time needed to cross one cell."""

    period_ms: float

    @classmethod
    def from_seconds(cls, period_s: float) -> Speed:
        return cls(period_s * 1000)

    @property
    def steps_per_millisecond(self) -> float:
        return 1.0 / self.period_ms

    @property
    def steps_per_second(self) -> float:
        return 1000.0 / self.period_ms
