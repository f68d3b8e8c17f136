"""Engine-level (generic) actions and the message that carries them.

Scene-specific actions are defined by each scene and never travel over the
engine channels.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ActionKind(Enum):
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    COMMAND = auto()
    QUIT = auto()


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    char: Optional[str] = None  # only set for COMMAND

    @classmethod
    def command(cls, char: str) -> Action:
        return cls(ActionKind.COMMAND, char)

    @property
    def is_move(self) -> bool:
        return self.kind in _MOVES

    @property
    def is_quit(self) -> bool:
        return self.kind is ActionKind.QUIT


MOVE_UP = Action(ActionKind.MOVE_UP)
MOVE_DOWN = Action(ActionKind.MOVE_DOWN)
MOVE_LEFT = Action(ActionKind.MOVE_LEFT)
MOVE_RIGHT = Action(ActionKind.MOVE_RIGHT)
QUIT = Action(ActionKind.QUIT)

_MOVES = frozenset(
    (ActionKind.MOVE_UP, ActionKind.MOVE_DOWN, ActionKind.MOVE_LEFT, ActionKind.MOVE_RIGHT)
)


@dataclass(frozen=True)
class GameData:
    action: Action
