from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

from core.actions import GameData
from core.game_object import GameObject
from core.sync import Guarded

if TYPE_CHECKING:  # pragma: no cover
    from core.engine import Engine

A = TypeVar("A")

ObjectHandle = Guarded[GameObject]


@dataclass
class Scene(Generic[A]):
    """Game-specific rules driven by the engine.

    A scene owns handles to its objects; the engine registry holds the same
    handles once `load()` has run. Subclasses override the hooks they need.
    """

    title: str = ""
    engine: Optional["Engine"] = None
    objects: List[ObjectHandle] = field(default_factory=list)

    def bind_engine(self, engine: "Engine") -> None:
        self.engine = engine

    def load(self) -> None:
        if self.engine is None:
            return
        for handle in self.objects:
            self.engine.add_object(handle)

    def update(self, elapsed: float) -> None:
        pass

    def draw_hud(self, width: int, height: int) -> List[str]:
        return []

    def draw_title(self, width: int, height: int) -> str:
        return self.title.center(width)

    def handle_input(self, data: GameData) -> None:
        pass
