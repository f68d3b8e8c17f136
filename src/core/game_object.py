from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Type, TypeVar

from core.actions import Action
from core.errors import InvalidSceneDowncast
from core.geometry import Position

A = TypeVar("A")  # scene-specific action type
O = TypeVar("O", bound="GameObject")


class GameObject(ABC, Generic[A]):
    """Anything the engine updates and draws every tick.

    Objects receive two kinds of events: generic engine actions (movement,
    commands) and the actions of the scene they live in. Each object decides
    which of them are relevant.
    """

    @abstractmethod
    def draw(self, screen) -> None: ...

    @abstractmethod
    def get_position(self) -> Position: ...

    @abstractmethod
    def update(self, elapsed: float) -> None:
        """Advance by `elapsed` seconds of wall-clock time."""

    @abstractmethod
    def react_to_action(self, action: Action) -> None: ...

    @abstractmethod
    def react_to_scene_action(self, action: A) -> None: ...

    def identify_as(self, cls: Type[O]) -> O:
        if not isinstance(self, cls):
            raise InvalidSceneDowncast(self, cls)
        return self
