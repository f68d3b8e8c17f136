"""Snake rules on top of the generic engine scene.

The scene checks the head against the play-field walls and the apple once per
logic tick and broadcasts the outcome to every object it owns; the snake and
the apple each decide what the event means for them.
"""

from __future__ import annotations

from typing import List, Optional

from config import GAME_AREA_HEIGHT, GAME_AREA_WIDTH
from core.actions import GameData
from core.scene import ObjectHandle, Scene
from core.sync import Guarded
from snake_game.actions import SnakeSceneAction
from snake_game.objects.apple import Apple
from snake_game.objects.snake import Snake

CONTROLS = "[R] - Restart Game  /  Arrow keys - Change snake direction"


class SnakeGameScene(Scene[SnakeSceneAction]):
    def __init__(self, snake: Optional[Snake] = None, apple: Optional[Apple] = None) -> None:
        self.snake: ObjectHandle = Guarded(snake or Snake(), "snake")
        self.apple: ObjectHandle = Guarded(apple or Apple(), "apple")
        super().__init__(title="*** SNAKE ***", objects=[self.snake, self.apple])

    # ------------------------------------------------------------------
    def broadcast(self, action: SnakeSceneAction) -> None:
        for handle in self.objects:
            with handle.lock() as obj:
                obj.react_to_scene_action(action)

    def eat_apple(self) -> None:
        self.broadcast(SnakeSceneAction.EAT_APPLE)

    def hit_wall(self) -> None:
        self.broadcast(SnakeSceneAction.HIT_WALL)

    def restart(self) -> None:
        self.broadcast(SnakeSceneAction.RESTART)

    def controls(self, char: str) -> None:
        if char in ("r", "R"):
            self.restart()

    # ------------------------------------------------------------------
    def update(self, elapsed: float) -> None:
        with self.snake.lock() as snake:
            snake_position = snake.get_position()
        with self.apple.lock() as apple:
            apple_position = apple.get_position()
        x, y = snake_position.screen_coordinates()
        if not (1 <= x <= GAME_AREA_WIDTH) or not (1 <= y <= GAME_AREA_HEIGHT):
            self.hit_wall()
        elif snake_position == apple_position:
            self.eat_apple()

    def draw_hud(self, width: int, height: int) -> List[str]:
        with self.snake.lock() as obj:
            snake = obj.identify_as(Snake)
            return [
                f"Speed  :{snake.speed.steps_per_second:>6g} blocks/second",
                f"Lives  :{snake.lives:>6}",
                f"Apples :{snake.apples:>6}",
                CONTROLS,
            ]

    def handle_input(self, data: GameData) -> None:
        action = data.action
        if action.char is not None:
            self.controls(action.char)
        elif action.is_move:
            with self.snake.lock() as snake:
                snake.react_to_action(action)
