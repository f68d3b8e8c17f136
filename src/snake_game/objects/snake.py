from __future__ import annotations

from typing import Optional

from config import (
    SNAKE_GLYPH,
    SNAKE_LIVES,
    SNAKE_PERIOD_MS,
    SNAKE_START_SEGMENTS,
    SNAKE_START_X,
    SNAKE_START_Y,
)
from core.actions import Action, ActionKind
from core.game_object import GameObject
from core.geometry import DOWN, LEFT, RIGHT, UP, Position, Speed
from snake_game.actions import SnakeSceneAction
from snake_game.objects.body import BodyChain

_TURNS = {
    ActionKind.MOVE_UP: UP,
    ActionKind.MOVE_DOWN: DOWN,
    ActionKind.MOVE_LEFT: LEFT,
    ActionKind.MOVE_RIGHT: RIGHT,
}


def start_position() -> Position:
    return Position(SNAKE_START_X, SNAKE_START_Y)


class Snake(GameObject[SnakeSceneAction]):
    """The player: a body chain plus lives, apples eaten and speed.

    Losing the last life restarts the game instead of ending it.
    """

    def __init__(
        self,
        position: Optional[Position] = None,
        speed: Optional[Speed] = None,
        lives: int = SNAKE_LIVES,
    ) -> None:
        self._start = position or start_position()
        self.body = BodyChain(self._start, RIGHT)
        self._speed = speed or Speed(SNAKE_PERIOD_MS)
        self._max_lives = lives
        self._lives = lives
        self._apples = 0
        self.reset()

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def apples(self) -> int:
        return self._apples

    @property
    def speed(self) -> Speed:
        return self._speed

    def add_body(self) -> None:
        self.body.add_body()

    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Back to the start cell facing right with the starting length."""
        self.body.reset(self._start, RIGHT, SNAKE_START_SEGMENTS)

    def restart(self) -> None:
        self._lives = self._max_lives
        self._apples = 0
        self.reset()

    def hit_wall(self) -> None:
        self._lose_life()

    def eat_apple(self) -> None:
        self.add_body()
        self._apples += 1

    def _lose_life(self) -> None:
        if self._lives > 1:
            self._lives -= 1
            self.reset()
        else:
            self.restart()

    # ------------------------------------------------------------------
    def update(self, elapsed: float) -> None:
        moved = self.body.advance(elapsed * 1000.0, self._speed)
        if moved and self.body.self_collision():
            self._lose_life()

    def draw(self, screen) -> None:
        for x, y in self.body.cells():
            if x > 0 and y > 0:
                screen.draw_point(SNAKE_GLYPH, x, y)

    def get_position(self) -> Position:
        head = self.body.head
        with head.lock:
            return head.position

    def react_to_action(self, action: Action) -> None:
        wanted = _TURNS.get(action.kind)
        if wanted is None:
            return
        head = self.body.head
        with head.lock:
            # No turning back into the neck
            if wanted != head.direction and wanted != head.direction.opposite():
                head.direction = wanted

    def react_to_scene_action(self, action: SnakeSceneAction) -> None:
        if action is SnakeSceneAction.EAT_APPLE:
            self.eat_apple()
        elif action is SnakeSceneAction.HIT_WALL:
            self.hit_wall()
        elif action is SnakeSceneAction.RESTART:
            self.restart()

    def __str__(self) -> str:
        return self.body.describe()
