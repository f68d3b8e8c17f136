"""Snake game package: re-export the scene and its objects.

Callers can import public types from `snake_game` directly, e.g.:

    from snake_game import SnakeGameScene, Snake, Apple
"""

from .actions import SnakeSceneAction
from .objects import Apple, BodyChain, Segment, Snake
from .scene import SnakeGameScene

__all__ = [
    "SnakeSceneAction",
    "Apple",
    "BodyChain",
    "Segment",
    "Snake",
    "SnakeGameScene",
]
