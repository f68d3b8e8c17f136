"""Snake game objects subpackage.

    from snake_game.objects import Snake, Apple
"""

from .body import BodyChain, Segment
from .snake import Snake
from .apple import Apple

__all__ = ["BodyChain", "Segment", "Snake", "Apple"]
