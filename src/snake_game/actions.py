from enum import Enum, auto


class SnakeSceneAction(Enum):
    """Scene-wide events broadcast to every object of the snake scene."""

    EAT_APPLE = auto()
    HIT_WALL = auto()
    RESTART = auto()
