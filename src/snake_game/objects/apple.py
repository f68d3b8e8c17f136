from __future__ import annotations

import random
from typing import Optional

from config import APPLE_GLYPH, GAME_AREA_HEIGHT, GAME_AREA_WIDTH
from core.actions import Action
from core.game_object import GameObject
from core.geometry import Position
from snake_game.actions import SnakeSceneAction


def random_position(rng: Optional[random.Random] = None) -> Position:
    """Uniformly random cell inside the play area, excluding its last column and row."""
    rng = rng or random
    x = rng.randrange(1, GAME_AREA_WIDTH)
    y = rng.randrange(1, GAME_AREA_HEIGHT)
    return Position(x, y)


class Apple(GameObject[SnakeSceneAction]):
    def __init__(
        self,
        position: Optional[Position] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng
        self.position = position or random_position(rng)

    def relocate(self) -> None:
        self.position = random_position(self._rng)

    def draw(self, screen) -> None:
        x, y = self.position.screen_coordinates()
        screen.draw_point(APPLE_GLYPH, x, y)

    def get_position(self) -> Position:
        return self.position

    def update(self, elapsed: float) -> None:
        pass

    def react_to_action(self, action: Action) -> None:
        pass

    def react_to_scene_action(self, action: SnakeSceneAction) -> None:
        if action is SnakeSceneAction.EAT_APPLE:
            self.relocate()
